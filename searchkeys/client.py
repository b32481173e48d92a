"""
Main searchkeys client.

This is the primary interface users interact with.
"""

from typing import Any, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .config import SearchKeysConfig, load_config
from .errors import HttpError
from .keys.models import Key, KeyBuilder, KeysQuery, KeysResults
from .utils.http import SearchHttpClient

ModelT = TypeVar("ModelT", bound=BaseModel)


class Client:
    """
    Client for the /keys resource of the search service.

    Every method is a single request/response exchange. Failures are raised
    as HttpError (transport, decoding) or ApiError (reported by the service)
    and are never retried.

    Example:
        ```python
        from searchkeys import Action, Client, KeyBuilder

        # Initialize from environment variables
        client = await Client.create()

        # Or with explicit config
        client = await Client.create(
            host="http://localhost:7700",
            api_key="masterKey"
        )

        key = await KeyBuilder().with_action(Action.SEARCH).with_index("*").execute(client)
        page = await client.get_keys()
        ```
    """

    def __init__(self, config: SearchKeysConfig, http: SearchHttpClient) -> None:
        """
        Initialize the client.

        Args:
            config: searchkeys configuration
            http: HTTP transport

        Note:
            Use Client.create() instead of direct instantiation.
        """
        self.config = config
        self.http = http

    @classmethod
    async def create(
        cls,
        host: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs,
    ) -> "Client":
        """
        Create and initialize a client.

        Args:
            host: Search service URL (optional, loads from env)
            api_key: Master or admin key (optional, loads from env)
            transport: Custom httpx transport (optional)
            **kwargs: Additional configuration options

        Returns:
            Initialized Client

        Raises:
            ValidationError: If configuration is invalid
        """
        config_kwargs = kwargs.copy()
        if host:
            config_kwargs["host"] = host
        if api_key:
            config_kwargs["api_key"] = api_key

        config = load_config(**config_kwargs)
        http = await SearchHttpClient.create(config, transport=transport)

        return cls(config=config, http=http)

    @staticmethod
    def _key_path(key: Union[str, Key]) -> str:
        return f"/keys/{quote(str(key), safe='')}"

    @staticmethod
    def _parse(model: Type[ModelT], body: Any) -> ModelT:
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise HttpError(f"Unexpected {model.__name__} response: {e}") from e

    def keys_query(self) -> KeysQuery:
        """Start a paginated listing bound to this client."""
        return KeysQuery(self)

    async def get_keys(self, query: Optional[KeysQuery] = None) -> KeysResults:
        """
        List keys.

        Args:
            query: Pagination parameters (service defaults when omitted)

        Returns:
            KeysResults page
        """
        return await self.execute_get_keys(query or KeysQuery(self))

    async def execute_get_keys(self, query: KeysQuery) -> KeysResults:
        """
        Run a KeysQuery.

        Args:
            query: Pagination parameters; unset ones are not sent

        Returns:
            KeysResults page with the limit and offset the service applied
        """
        body = await self.http.get("/keys", params=query.to_params())
        return self._parse(KeysResults, body)

    async def get_key(self, key: Union[str, Key]) -> Key:
        """
        Get one key.

        Args:
            key: Key string (or uid), or a Key

        Returns:
            Key instance

        Raises:
            ApiError: If the key does not exist
        """
        body = await self.http.get(self._key_path(key))
        return self._parse(Key, body)

    async def create_key(self, builder: KeyBuilder) -> Key:
        """
        Create a key.

        Args:
            builder: Description of the key to create

        Returns:
            The new Key with its service-assigned key and timestamps

        Example:
            ```python
            builder = KeyBuilder().with_actions([Action.SEARCH, Action.DOCUMENTS_GET])
            builder.with_indexes(["movies", "books"])
            key = await client.create_key(builder)
            ```
        """
        body = await self.http.post("/keys", json=builder.to_payload())
        return self._parse(Key, body)

    async def update_key(self, key: Key) -> Key:
        """
        Send a partial update for a key.

        Args:
            key: Key carrying the new values

        Returns:
            The Key as stored by the service after the update
        """
        body = await self.http.patch(self._key_path(key), json=key.to_payload())
        return self._parse(Key, body)

    async def delete_key(self, key: Union[str, Key]) -> None:
        """
        Delete a key. A Key object passed in is not modified.

        Args:
            key: Key string (or uid), or a Key
        """
        await self.http.delete(self._key_path(key))

    async def close(self) -> None:
        """
        Close the client and release the HTTP connection pool.

        Example:
            ```python
            client = await Client.create()
            try:
                ...
            finally:
                await client.close()
            ```
        """
        await self.http.close()

    async def __aenter__(self) -> "Client":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
