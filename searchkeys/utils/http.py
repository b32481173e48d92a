"""
HTTP transport for searchkeys.

Provides a thin wrapper around httpx.AsyncClient configured for the search
service: base URL, bearer authentication, timeout and error mapping.
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from ..config import SearchKeysConfig
from ..errors import ApiError, HttpError

logger = structlog.get_logger(__name__)


class SearchHttpClient:
    """
    Wrapper around httpx.AsyncClient with searchkeys-specific configuration.

    This class provides:
    1. A client bound to the configured host with the API key as bearer token
    2. JSON request/response handling
    3. Mapping of failures to HttpError / ApiError

    Example:
        ```python
        from searchkeys.config import SearchKeysConfig
        from searchkeys.utils.http import SearchHttpClient

        config = SearchKeysConfig(host="http://localhost:7700", api_key="masterKey")
        http = await SearchHttpClient.create(config)

        body = await http.get("/keys", params={"limit": 5})
        ```
    """

    USER_AGENT = "searchkeys-python"

    def __init__(self, config: SearchKeysConfig, client: httpx.AsyncClient) -> None:
        """
        Initialize the transport.

        Args:
            config: searchkeys configuration
            client: Initialized httpx.AsyncClient

        Note:
            Use SearchHttpClient.create() instead of direct instantiation.
        """
        self.config = config
        self._client = client

    @classmethod
    async def create(
        cls,
        config: SearchKeysConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SearchHttpClient":
        """
        Create and initialize a SearchHttpClient.

        Args:
            config: searchkeys configuration
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)

        Returns:
            Initialized SearchHttpClient
        """
        headers = {
            "Content-Type": "application/json",
            "User-Agent": cls.USER_AGENT,
        }
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"

        client = httpx.AsyncClient(
            base_url=config.host,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
        )

        return cls(config=config, client=client)

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path relative to the configured host
            params: Query string parameters
            json: JSON body

        Returns:
            Decoded JSON body, or None for an empty response (e.g. 204)

        Raises:
            HttpError: If the request fails or the body is not valid JSON
            ApiError: If the service responds with a non-2xx status
        """
        if self.config.debug:
            logger.debug("search_request", method=method, path=path, params=params)

        try:
            response = await self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            raise HttpError(f"{method} {path} failed: {e}") from e

        if self.config.debug:
            logger.debug(
                "search_response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

        if response.is_success:
            if response.status_code == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise HttpError(f"Invalid JSON in response to {method} {path}") from e

        try:
            body = response.json()
        except ValueError:
            body = None
        raise ApiError.from_response_body(response.status_code, body, response.text)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("POST", path, json=json)

    async def patch(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()
