"""
Storage data models for the quote service.
"""

import uuid
from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Quote(BaseModel):
    """Model representing a stored quote."""

    model_config = ConfigDict(validate_assignment=True)

    id: Annotated[uuid.UUID, Field(description="Quote identifier")]
    book: Annotated[str, Field(description="Book the quote comes from")]
    quote: Annotated[str, Field(description="Quote text")]
    inserted_at: Annotated[datetime, Field(description="Creation timestamp")]
    updated_at: Annotated[datetime, Field(description="Last update timestamp")]

    @classmethod
    def new(cls, book: str, quote: str) -> "Quote":
        """Build a fresh quote with a new id and both timestamps set to now."""
        now = datetime.now(UTC)
        return cls(
            id=uuid.uuid4(),
            book=book,
            quote=quote,
            inserted_at=now,
            updated_at=now,
        )

    @field_serializer("inserted_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        """Serialize datetime to ISO format."""
        return value.isoformat()
