"""MongoDB operations on the listings collection."""

import logging
from datetime import datetime
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.results import DeleteResult, InsertManyResult, InsertOneResult, UpdateResult
from pymongo.server_api import ServerApi

from listing_crud.models.listing import Listing
from listing_crud.reporting.formatter import format_database_list, format_listing_results

logger = logging.getLogger(__name__)


class ListingStore:
    """Async MongoDB store for creating, querying and removing listings."""

    def __init__(
        self,
        db_url: str = "",
        db_name: str = "employee",
        collection_name: str = "data",
        client: Any = None,
    ):
        self.db_url = db_url
        self.db_name = db_name
        self.collection_name = collection_name
        self._client = client
        self._owns_client = client is None

    async def connect(self):
        """Create the client with the Stable API v1 and connect it."""
        if self._client is not None:
            return
        self._client = AsyncMongoClient(
            self.db_url,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        await self._client.aconnect()

    async def close(self):
        """Close the client if this store created it."""
        if self._client is not None and self._owns_client:
            await self._client.close()
            self._client = None

    @property
    def client(self):
        if self._client is None:
            raise RuntimeError("ListingStore is not connected")
        return self._client

    @property
    def collection(self):
        return self.client[self.db_name][self.collection_name]

    async def list_database_names(self) -> list[str]:
        """List the databases on the deployment."""
        names = await self.client.list_database_names()
        logger.info(f"Databases:\n{format_database_list(names)}")
        return names

    async def ping(self):
        """Send a ping to confirm a successful connection."""
        await self.client.admin.command("ping")
        logger.info("Pinged your deployment. You successfully connected to MongoDB!")

    async def create_listing(self, listing: Listing) -> InsertOneResult:
        result = await self.collection.insert_one(listing.to_document())
        listing.id = result.inserted_id
        logger.info(f"New listing created with the following id: {result.inserted_id}")
        return result

    async def create_multiple_listings(self, listings: list[Listing]) -> InsertManyResult:
        result = await self.collection.insert_many([l.to_document() for l in listings])
        for listing, inserted_id in zip(listings, result.inserted_ids):
            listing.id = inserted_id
        logger.info(
            f"{len(result.inserted_ids)} new listing(s) created with the following id(s):"
        )
        logger.info(f"{result.inserted_ids}")
        return result

    async def find_one_listing_by_name(self, name_of_listing: str) -> Listing | None:
        doc = await self.collection.find_one({"name": name_of_listing})
        if doc is None:
            logger.info(f"No listings found with the name '{name_of_listing}'")
            return None

        logger.info(f"Found a listing in the collection with the name '{name_of_listing}':")
        logger.info(f"{doc}")
        return Listing.from_document(doc)

    async def find_listings_with_minimum_bedrooms_bathrooms_and_most_recent_reviews(
        self,
        minimum_number_of_bedrooms: float = 0,
        minimum_number_of_bathrooms: float = 0,
        maximum_number_of_results: int | None = None,
    ) -> list[Listing]:
        """Find listings with enough rooms, most recently reviewed first.

        A maximum of None returns every match.
        """
        cursor = self.collection.find(
            {
                "bedrooms": {"$gte": minimum_number_of_bedrooms},
                "bathrooms": {"$gte": minimum_number_of_bathrooms},
            },
            sort=[("last_review", -1)],
            # limit=0 means no limit
            limit=maximum_number_of_results or 0,
        )
        docs = await cursor.to_list(length=None)
        results = [Listing.from_document(doc) for doc in docs]
        logger.info(
            format_listing_results(
                results, minimum_number_of_bedrooms, minimum_number_of_bathrooms
            )
        )
        return results

    async def update_listing_by_name(
        self, name_of_listing: str, updated_listing: dict
    ) -> UpdateResult:
        result = await self.collection.update_one(
            {"name": name_of_listing}, {"$set": updated_listing}
        )
        self._log_update(result)
        return result

    async def upsert_listing_by_name(
        self, name_of_listing: str, updated_listing: dict
    ) -> UpdateResult:
        """Update the named listing, inserting it if nothing matches."""
        result = await self.collection.update_one(
            {"name": name_of_listing}, {"$set": updated_listing}, upsert=True
        )
        logger.info(f"{result.matched_count} document(s) matched the query criteria.")
        if result.upserted_id is not None:
            logger.info(f"One document was inserted with the id {result.upserted_id}")
        else:
            logger.info(f"{result.modified_count} document(s) was/were updated.")
        return result

    async def update_all_listings_to_have_property_type(self) -> UpdateResult:
        """Give every listing without a property type the type 'Unknown'."""
        result = await self.collection.update_many(
            {"property_type": {"$exists": False}},
            {"$set": {"property_type": "Unknown"}},
        )
        self._log_update(result)
        return result

    async def delete_listing_by_name(self, name_of_listing: str) -> DeleteResult:
        result = await self.collection.delete_one({"name": name_of_listing})
        logger.info(f"{result.deleted_count} document(s) was/were deleted.")
        return result

    async def delete_listings_scraped_before_date(self, date: datetime) -> DeleteResult:
        result = await self.collection.delete_many({"last_scraped": {"$lt": date}})
        logger.info(f"{result.deleted_count} document(s) was/were deleted.")
        return result

    @staticmethod
    def _log_update(result: UpdateResult):
        logger.info(f"{result.matched_count} document(s) matched the query criteria.")
        logger.info(f"{result.modified_count} document(s) was/were updated.")

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
