"""
searchkeys key models.

Pydantic models for the /keys resource of the search service.

Key is the read view returned by the service. KeyBuilder is the write view
used to request a new key. Both serialize to the same wire shape: camelCase
names, RFC3339 timestamps, and no empty `actions` / `indexes` lists.
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Dict, Iterable, List, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, model_serializer
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from ..client import Client


# The service emits nanosecond precision; datetime holds microseconds.
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


def _truncate_fraction(value: Any) -> Any:
    if isinstance(value, str):
        return _EXTRA_FRACTION.sub(r"\1", value)
    return value


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[
    datetime,
    BeforeValidator(_truncate_fraction),
    AfterValidator(_assume_utc),
]


class Action(str, Enum):
    """Permission scopes a key can grant."""

    # Everything
    ALL = "*"

    # Search
    SEARCH = "search"

    # Documents
    DOCUMENTS_ADD = "documents.add"
    DOCUMENTS_GET = "documents.get"
    DOCUMENTS_DELETE = "documents.delete"

    # Indexes
    INDEXES_CREATE = "indexes.create"
    INDEXES_GET = "indexes.get"
    INDEXES_UPDATE = "indexes.update"
    INDEXES_DELETE = "indexes.delete"

    # Tasks
    TASKS_GET = "tasks.get"

    # Settings
    SETTINGS_GET = "settings.get"
    SETTINGS_UPDATE = "settings.update"

    # Stats
    STATS_GET = "stats.get"

    # Dumps (not restricted by indexes)
    DUMPS_CREATE = "dumps.create"
    DUMPS_GET = "dumps.get"

    # Version endpoint
    VERSION = "version"


class KeyFields(BaseModel):
    """
    Fields shared by Key and KeyBuilder, with the outbound serialization rules.

    When serialized, `actions` and `indexes` are dropped if empty and
    `expires_at` is dropped if unset. `description` and `name` are always
    written so that a null clears them.
    """

    actions: List[Action] = Field(default_factory=list)
    description: Optional[str] = None
    name: Optional[str] = None
    expires_at: Optional[Timestamp] = None
    indexes: List[str] = Field(default_factory=list)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "validate_assignment": True,
    }

    @model_serializer(mode="wrap")
    def omit_unset_wire_fields(self, handler) -> Dict[str, Any]:
        data = handler(self)
        for field in ("actions", "indexes"):
            if field in data and not data[field]:
                del data[field]
        for field in ("expires_at", "expiresAt"):
            if field in data and data[field] is None:
                del data[field]
        return data

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body sent to the service."""
        return self.model_dump(mode="json", by_alias=True)


class Key(KeyFields):
    """
    API key as returned by the search service.

    `key`, `created_at` and `updated_at` are assigned by the service and are
    never sent back. A Key can be passed anywhere a key identifier is expected;
    `str(key)` is the secret key string.

    Example:
        ```python
        key = await client.get_key("d0552b41536279a0ad88bd595327b96f01176a60c2243e906c52ac02375f9bc4")
        key.with_description("Search-only key for the storefront")
        key = await key.update(client)
        ```
    """

    created_at: Timestamp = Field(exclude=True)
    key: str = Field(exclude=True)
    updated_at: Timestamp = Field(exclude=True)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Default Search API Key",
                "description": "Use it to search from the frontend",
                "key": "d0552b41536279a0ad88bd595327b96f01176a60c2243e906c52ac02375f9bc4",
                "actions": ["search"],
                "indexes": ["*"],
                "expiresAt": None,
                "createdAt": "2024-01-01T00:00:00Z",
                "updatedAt": "2024-01-01T00:00:00Z",
            }
        },
    }

    def with_description(self, description: str) -> "Key":
        """Set the description. Call update() to send it to the service."""
        self.description = description
        return self

    def with_name(self, name: str) -> "Key":
        """Set the name. Call update() to send it to the service."""
        self.name = name
        return self

    async def update(self, client: "Client") -> "Key":
        """
        Send the local changes to the service.

        Args:
            client: Client to send the request with

        Returns:
            The Key as stored by the service after the update

        Raises:
            HttpError: If the request fails or the response cannot be decoded
            ApiError: If the service rejects the update
        """
        return await client.update_key(self)

    def __str__(self) -> str:
        return self.key


class KeyBuilder(KeyFields):
    """
    Request for a new key, without the fields managed by the service.

    Mutators return the builder so calls can be chained.

    Example:
        ```python
        key = await (
            KeyBuilder()
            .with_name("storefront")
            .with_action(Action.SEARCH)
            .with_index("products")
            .execute(client)
        )
        print(key.key)
        ```
    """

    def with_actions(self, actions: Iterable[Action]) -> "KeyBuilder":
        """Append actions. Duplicates are kept."""
        self.actions.extend(Action(action) for action in actions)
        return self

    def with_action(self, action: Action) -> "KeyBuilder":
        """Append one action."""
        self.actions.append(Action(action))
        return self

    def with_expires_at(self, expires_at: datetime) -> "KeyBuilder":
        """Set the expiration date, replacing any previous one."""
        self.expires_at = expires_at
        return self

    def with_indexes(self, indexes: Iterable[str]) -> "KeyBuilder":
        """Replace the indexes the key is scoped to."""
        self.indexes = [str(index) for index in indexes]
        return self

    def with_index(self, index: str) -> "KeyBuilder":
        """Append one index pattern."""
        self.indexes.append(str(index))
        return self

    def with_description(self, description: str) -> "KeyBuilder":
        self.description = description
        return self

    def with_name(self, name: str) -> "KeyBuilder":
        self.name = name
        return self

    async def execute(self, client: "Client") -> Key:
        """
        Create the key on the service.

        Args:
            client: Client to send the request with

        Returns:
            The new Key, carrying the service-assigned key and timestamps

        Raises:
            HttpError: If the request fails or the response cannot be decoded
            ApiError: If the service rejects the request
        """
        return await client.create_key(self)


class KeysQuery:
    """
    Paginated listing of keys.

    Unset parameters are left out of the request so the service applies its
    defaults (offset 0, limit 20).

    Example:
        ```python
        results = await KeysQuery(client).with_offset(20).with_limit(10).execute()
        ```
    """

    def __init__(self, client: "Client") -> None:
        self.client = client
        self.offset: Optional[int] = None
        self.limit: Optional[int] = None

    def with_offset(self, offset: int) -> "KeysQuery":
        """Number of keys to skip."""
        self.offset = offset
        return self

    def with_limit(self, limit: int) -> "KeysQuery":
        """Maximum number of keys to return."""
        self.limit = limit
        return self

    def to_params(self) -> Dict[str, int]:
        """Query string parameters for the parameters that were set."""
        params: Dict[str, int] = {}
        if self.offset is not None:
            params["offset"] = self.offset
        if self.limit is not None:
            params["limit"] = self.limit
        return params

    async def execute(self) -> "KeysResults":
        """Fetch the page of keys described by this query."""
        return await self.client.execute_get_keys(self)


class KeysResults(BaseModel):
    """A page of keys with the pagination parameters the service applied."""

    results: List[Key]
    limit: int
    offset: int
    total: Optional[int] = None
