"""
Pytest configuration and fixtures for searchkeys tests.

Provides an in-memory fake of the search service /keys resource served
through httpx.MockTransport.
"""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

import httpx
import pytest

from searchkeys.client import Client
from searchkeys.config import SearchKeysConfig
from searchkeys.keys.models import Action
from searchkeys.utils.http import SearchHttpClient

MASTER_KEY = "masterKey-for-tests"
KNOWN_ACTIONS = {action.value for action in Action}


class FakeSearchService:
    """
    Minimal stand-in for the /keys endpoints of the search service.

    Timestamps advance one second per write and carry nanosecond fractions,
    like the real service.
    """

    def __init__(self) -> None:
        self.keys: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _now(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.strftime("%Y-%m-%dT%H:%M:%S") + ".123456789Z"

    def seed(
        self,
        name: Optional[str] = None,
        actions: Optional[List[str]] = None,
        indexes: Optional[List[str]] = None,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Store a key directly, bypassing HTTP."""
        now = self._now()
        record = {
            "name": name,
            "description": description,
            "key": uuid4().hex,
            "actions": actions or [],
            "indexes": indexes or [],
            "expiresAt": None,
            "createdAt": now,
            "updatedAt": now,
        }
        self.keys[record["key"]] = record
        return record

    @staticmethod
    def _error(status: int, message: str, code: str, error_type: str) -> httpx.Response:
        return httpx.Response(
            status,
            json={
                "message": message,
                "code": code,
                "type": error_type,
                "link": f"https://docs.example.com/errors#{code}",
            },
        )

    def _not_found(self, key: str) -> httpx.Response:
        return self._error(404, f"API key `{key}` not found.", "api_key_not_found", "invalid_request")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("Authorization") != f"Bearer {MASTER_KEY}":
            return self._error(401, "The provided API key is invalid.", "invalid_api_key", "auth")

        parts = request.url.path.strip("/").split("/")
        if parts[0] != "keys":
            return self._error(404, "Not found.", "not_found", "invalid_request")

        if len(parts) == 1:
            if request.method == "GET":
                return self._list(request)
            if request.method == "POST":
                return self._create(json.loads(request.content))
        else:
            key = parts[1]
            if key not in self.keys:
                return self._not_found(key)
            if request.method == "GET":
                return httpx.Response(200, json=self.keys[key])
            if request.method == "PATCH":
                return self._update(key, json.loads(request.content))
            if request.method == "DELETE":
                del self.keys[key]
                return httpx.Response(204)

        return self._error(405, "Method not allowed.", "method_not_allowed", "invalid_request")

    def _list(self, request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params.get("offset", 0))
        limit = int(request.url.params.get("limit", 20))
        records = list(self.keys.values())
        return httpx.Response(
            200,
            json={
                "results": records[offset:offset + limit],
                "offset": offset,
                "limit": limit,
                "total": len(records),
            },
        )

    def _create(self, body: Dict[str, Any]) -> httpx.Response:
        unknown = [a for a in body.get("actions", []) if a not in KNOWN_ACTIONS]
        if unknown:
            return self._error(
                400,
                f"Unknown value `{unknown[0]}` at `.actions`.",
                "invalid_api_key_actions",
                "invalid_request",
            )

        record = self.seed(
            name=body.get("name"),
            actions=body.get("actions"),
            indexes=body.get("indexes"),
            description=body.get("description"),
        )
        record["expiresAt"] = body.get("expiresAt")
        return httpx.Response(201, json=record)

    def _update(self, key: str, body: Dict[str, Any]) -> httpx.Response:
        record = self.keys[key]
        for field in ("name", "description"):
            if field in body:
                record[field] = body[field]
        record["updatedAt"] = self._now()
        return httpx.Response(200, json=record)


@pytest.fixture
def service():
    """Create an empty fake search service."""
    return FakeSearchService()


@pytest.fixture
def search_config():
    """Create a test SearchKeysConfig."""
    return SearchKeysConfig(
        host="http://search.test",
        api_key=MASTER_KEY,
    )


@pytest.fixture
async def client(service, search_config):
    """Create a Client wired to the fake service."""
    http = await SearchHttpClient.create(
        search_config,
        transport=httpx.MockTransport(service.handler),
    )
    client_instance = Client(config=search_config, http=http)
    yield client_instance
    await client_instance.close()


@pytest.fixture
def sample_key_data():
    """Create sample key data as the service returns it."""
    return {
        "name": "Default Search API Key",
        "description": "Use it to search from the frontend",
        "key": "d0552b41536279a0ad88bd595327b96f01176a60c2243e906c52ac02375f9bc4",
        "actions": ["search"],
        "indexes": ["*"],
        "expiresAt": None,
        "createdAt": "2024-01-01T00:00:00.123456789Z",
        "updatedAt": "2024-01-02T00:00:00Z",
    }
