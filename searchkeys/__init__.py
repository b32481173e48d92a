"""
searchkeys - API key management client for a search service.

Create, list, update and delete the permissioned API keys that gate access
to the search, document, index, task, settings, stats and dump endpoints.

Example:
    ```python
    from searchkeys import Action, Client, KeyBuilder

    async with await Client.create(host="http://localhost:7700", api_key="masterKey") as client:
        # Create a search-only key for every index
        key = await (
            KeyBuilder()
            .with_action(Action.SEARCH)
            .with_index("*")
            .execute(client)
        )

        # Rename it
        key = await key.with_name("storefront").update(client)

        # Page through keys
        page = await client.keys_query().with_offset(0).with_limit(10).execute()

        # Delete it
        await client.delete_key(key)
    ```
"""

from .client import Client
from .config import SearchKeysConfig, load_config
from .errors import ApiError, HttpError, SearchKeysError
from .keys import Action, Key, KeyBuilder, KeysQuery, KeysResults

__version__ = "0.1.0"

__all__ = [
    # Main client
    "Client",
    "SearchKeysConfig",
    "load_config",
    # Keys
    "Action",
    "Key",
    "KeyBuilder",
    "KeysQuery",
    "KeysResults",
    # Errors
    "SearchKeysError",
    "HttpError",
    "ApiError",
]
