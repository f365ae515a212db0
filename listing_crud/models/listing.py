"""Listing document model."""

from dataclasses import dataclass, field, fields
from datetime import date, datetime, time, timezone
from typing import Any

TIMESTAMP_FIELDS = ("last_review", "last_scraped")


def parse_timestamp(value: Any) -> Any:
    """Coerce a stored or configured timestamp to a datetime where possible.

    The string ``"now"`` stands for the current time so sample data can ask
    for a fresh review date. Values that are not recognisable dates are kept
    as they are.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        # YAML reads an unquoted 2019-01-01 as a date
        return datetime.combine(value, time())
    if isinstance(value, str):
        if value.lower() == "now":
            return datetime.now(timezone.utc)
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return value
    return value


@dataclass
class Listing:
    """A loosely typed rental listing document.

    Every field is optional. Keys the model does not know about are kept in
    ``extra`` and written back untouched.
    """

    name: str | None = None
    summary: str | None = None
    bedrooms: float | None = None
    bathrooms: float | None = None
    beds: float | None = None
    property_type: str | None = None
    last_review: datetime | Any = None
    last_scraped: datetime | Any = None
    id: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for name in TIMESTAMP_FIELDS:
            setattr(self, name, parse_timestamp(getattr(self, name)))

    def to_document(self) -> dict:
        """Convert to a document for the driver, skipping unset fields."""
        doc: dict[str, Any] = {}
        if self.id is not None:
            doc["_id"] = self.id
        for name in _document_fields():
            value = getattr(self, name)
            if value is not None:
                doc[name] = value
        doc.update(self.extra)
        return doc

    @classmethod
    def from_document(cls, data: dict) -> "Listing":
        """Create a Listing from a driver document or plain dict."""
        data = dict(data)
        known = {name: data.pop(name) for name in _document_fields() if name in data}
        return cls(id=data.pop("_id", None), extra=data, **known)


def _document_fields() -> list[str]:
    return [f.name for f in fields(Listing) if f.name not in ("id", "extra")]
