"""
API keys example.

This example shows how to:
- Create a scoped key with KeyBuilder
- Rename and describe it
- Page through existing keys
- Delete it

Run with a search service on localhost:7700:
    SEARCHKEYS_API_KEY=masterKey python examples/keys_example.py
"""

import asyncio
from datetime import datetime, timedelta, timezone

from searchkeys import Action, ApiError, Client, KeyBuilder


async def main():
    client = await Client.create()

    try:
        # =================================================================
        # 1. Create a key
        # =================================================================
        print("Creating key...")

        key = await (
            KeyBuilder()
            .with_name("storefront")
            .with_actions([Action.SEARCH, Action.DOCUMENTS_GET])
            .with_indexes(["products", "categories"])
            .with_expires_at(datetime.now(timezone.utc) + timedelta(days=90))
            .execute(client)
        )

        print(f"  Key: {key.key}")
        print(f"  Actions: {[a.value for a in key.actions]}")
        print(f"  Indexes: {key.indexes}")
        print(f"  Expires: {key.expires_at}")

        # =================================================================
        # 2. Update it
        # =================================================================
        print("\nUpdating key...")

        key = await key.with_description("Read-only access for the web shop").update(client)
        print(f"  Description: {key.description}")
        print(f"  Updated at: {key.updated_at}")

        # =================================================================
        # 3. List keys
        # =================================================================
        print("\nListing keys...")

        page = await client.keys_query().with_limit(10).execute()
        for listed in page.results:
            print(f"  - {listed.name or '(unnamed)'}: {listed.key[:8]}...")

        # =================================================================
        # 4. Delete it
        # =================================================================
        print("\nDeleting key...")

        await client.delete_key(key)

        try:
            await client.get_key(key)
        except ApiError as e:
            print(f"  Gone: {e.code}")

    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
