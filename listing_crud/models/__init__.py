"""Data models and database operations."""

from listing_crud.models.listing import Listing
from listing_crud.models.database import ListingStore

__all__ = ["Listing", "ListingStore"]
