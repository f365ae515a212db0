"""Settings management - loads from .env and listings.yaml."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv
import os

from listing_crud.models.listing import Listing


DEFAULT_LISTING = {
    "name": "Lovely Loft",
    "summary": "A charming loft in Paris",
    "bedrooms": 1,
    "bathrooms": 1,
}

DEFAULT_LISTINGS = [
    {
        "name": "Infinite Views",
        "summary": "Modern home with infinite views from the infinity pool",
        "property_type": "House",
        "bedrooms": 5,
        "bathrooms": 4.5,
        "beds": 5,
    },
    {
        "name": "Private room in London",
        "property_type": "Apartment",
        "bedrooms": 1,
        "bathroom": 1,
    },
    {
        "name": "Beautiful Beach House",
        "summary": "Enjoy relaxed beach living in this house with a private beach",
        "bedrooms": 4,
        "bathrooms": 2.5,
        "beds": 7,
        "last_review": "now",
    },
]


@dataclass
class SampleListings:
    """Documents inserted by the demo's create operations."""

    listing: Listing
    listings: list[Listing] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "SampleListings":
        return cls(
            listing=Listing.from_document(data.get("listing") or DEFAULT_LISTING),
            listings=[
                Listing.from_document(d)
                for d in (data.get("listings") or DEFAULT_LISTINGS)
            ],
        )


def load_sample_listings(path: str | Path | None = None) -> SampleListings:
    """Load sample listings from YAML, falling back to the built-in set."""
    sample_file = Path(path) if path else Path("config/listings.yaml")
    data = {}
    if sample_file.exists():
        with open(sample_file) as f:
            data = yaml.safe_load(f) or {}
    return SampleListings.from_dict(data)


@dataclass
class Settings:
    """Application settings loaded from environment and config files."""

    # Database
    db_url: str
    db_name: str
    collection_name: str

    # Server
    host: str
    port: int

    # Demo data
    listings_path: str = "config/listings.yaml"

    @classmethod
    def load(cls, env_path: str | None = None, listings_path: str | None = None) -> "Settings":
        """Load settings from .env file and the environment."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        return cls(
            db_url=os.getenv("DB_URL", ""),
            db_name=os.getenv("DB_NAME", "employee"),
            collection_name=os.getenv("COLLECTION_NAME", "data"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            listings_path=listings_path or os.getenv("LISTINGS_PATH", "config/listings.yaml"),
        )

    def sample_listings(self) -> SampleListings:
        return load_sample_listings(self.listings_path)

    def validate(self) -> list[str]:
        """Validate settings and return list of errors."""
        errors = []
        if not self.db_url:
            errors.append("DB_URL is required")
        if not self.db_name:
            errors.append("DB_NAME must not be empty")
        if not self.collection_name:
            errors.append("COLLECTION_NAME must not be empty")
        return errors
