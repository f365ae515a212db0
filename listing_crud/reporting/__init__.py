"""Console report formatting."""

from listing_crud.reporting.formatter import (
    format_database_list,
    format_listing_results,
    format_listing_summary,
    format_review_date,
)

__all__ = [
    "format_database_list",
    "format_listing_results",
    "format_listing_summary",
    "format_review_date",
]
