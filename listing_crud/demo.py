"""Run the listing CRUD demonstration against MongoDB."""

import asyncio
import logging
import sys
from datetime import datetime

from listing_crud.config.settings import Settings
from listing_crud.models.database import ListingStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def run(settings: Settings, store: ListingStore | None = None):
    """Run every demo operation in order on one connection.

    The connection is closed whether the sequence finishes or fails.
    """
    samples = settings.sample_listings()
    store = store or ListingStore(
        settings.db_url, settings.db_name, settings.collection_name
    )

    try:
        await store.connect()

        await store.list_database_names()

        await store.create_listing(samples.listing)

        await store.create_multiple_listings(samples.listings)

        await store.find_one_listing_by_name("Infinite Views")

        await store.find_listings_with_minimum_bedrooms_bathrooms_and_most_recent_reviews(
            minimum_number_of_bedrooms=4,
            minimum_number_of_bathrooms=2,
            maximum_number_of_results=5,
        )

        await store.update_listing_by_name("Infinite Views", {"bedrooms": 6, "beds": 8})

        await store.upsert_listing_by_name(
            "Cozy Cottage", {"name": "Cozy Cottage", "bedrooms": 2, "bathrooms": 1}
        )

        await store.update_all_listings_to_have_property_type()

        await store.delete_listing_by_name("Cozy Cottage")

        await store.delete_listings_scraped_before_date(datetime(2019, 2, 15))

        await store.ping()
    finally:
        await store.close()


def main() -> int:
    """Entry point for the demo script."""
    settings = Settings.load()
    errors = settings.validate()
    if errors:
        for error in errors:
            logger.error(f"Config error: {error}")
        return 1

    try:
        asyncio.run(run(settings))
    except Exception:
        logger.exception("Demo run failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
