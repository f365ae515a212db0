"""Format listings and query results for the console log."""

from datetime import datetime
from typing import Any

from listing_crud.models.listing import Listing


def format_review_date(value: datetime | Any) -> str:
    """Render a review date like ``Mon Oct 19 2026``.

    Args:
        value: The review timestamp, if any

    Returns:
        The date string, ``unknown`` when the listing has no review, or the
        raw value when it is not a datetime
    """
    if value is None:
        return "unknown"
    if not isinstance(value, datetime):
        return str(value)
    return value.strftime("%a %b %d %Y")


def format_listing_summary(index: int, listing: Listing) -> str:
    """Format one numbered search result.

    Args:
        index: 1-based position in the result list
        listing: The listing to format

    Returns:
        Indented multi-line block for the listing
    """
    lines = [
        f"{index}. name: {listing.name}",
        f"   _id: {listing.id}",
        f"   bedrooms: {listing.bedrooms}",
        f"   bathrooms: {listing.bathrooms}",
        f"   most recent review date: {format_review_date(listing.last_review)}",
    ]
    return "\n".join(lines)


def format_listing_results(
    listings: list[Listing],
    minimum_number_of_bedrooms: float,
    minimum_number_of_bathrooms: float,
) -> str:
    """Format the results of a bedrooms/bathrooms search.

    Args:
        listings: Listings returned by the query, already sorted
        minimum_number_of_bedrooms: Bedroom threshold used in the query
        minimum_number_of_bathrooms: Bathroom threshold used in the query

    Returns:
        Formatted report, or a single line when nothing matched
    """
    criteria = (
        f"at least {minimum_number_of_bedrooms} bedrooms "
        f"and {minimum_number_of_bathrooms} bathrooms"
    )
    if not listings:
        return f"No listings found with {criteria}"

    lines = [f"Found listing(s) with {criteria}:"]
    for i, listing in enumerate(listings, 1):
        lines.append("")
        lines.append(format_listing_summary(i, listing))
    return "\n".join(lines)


def format_database_list(names: list[str]) -> str:
    """Format database names one per line."""
    return "\n".join(f" - {name}" for name in names)
