from __future__ import annotations

import pytest
from mongomock_motor import AsyncMongoMockClient

from listing_crud.models import ListingStore


@pytest.fixture
def client() -> AsyncMongoMockClient:
    return AsyncMongoMockClient()


@pytest.fixture
def store(client: AsyncMongoMockClient) -> ListingStore:
    return ListingStore(db_name="employee", collection_name="data", client=client)
