"""Pydantic schema for book records supplied by the bookshelf host.

The host's book list uses camelCase keys and identifies books by ASIN:

    {"asin": "B0XXXXXXXX", "title": "...", "authors": "...", "readStatus": "Read"}

Two modes of operation:
- Lenient (default): invalid entries are skipped with a warning
- Strict: all failures are collected and raised as one ValidationError
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from vshelf.exceptions import ValidationError

logger = logging.getLogger(__name__)


class BookRecord(BaseModel):
    """A book as seen by series detection.

    Title and authors may be missing; such books are simply never grouped.
    """

    id: str = Field(validation_alias=AliasChoices("id", "asin"), min_length=1)
    title: str | None = None
    authors: str | None = None
    read_status: str | None = Field(
        default=None,
        validation_alias=AliasChoices("read_status", "readStatus"),
        serialization_alias="readStatus",
    )

    model_config = {
        "extra": "ignore",
        "frozen": True,
        "populate_by_name": True,
    }

    @field_validator("authors", mode="before")
    @classmethod
    def join_author_list(cls, v: Any) -> Any:
        """Accept a list of author names and join it the way the host displays it."""
        if isinstance(v, list):
            return ", ".join(str(name) for name in v if name)
        return v


def validate_book_records(
    items: Iterable[dict[str, Any]],
    *,
    strict: bool = False,
) -> list[BookRecord]:
    """Validate raw book dictionaries into BookRecord models.

    Args:
        items: Raw book dictionaries from the host
        strict: Raise on any invalid entry instead of skipping it

    Returns:
        Valid records, in input order

    Raises:
        vshelf.exceptions.ValidationError: In strict mode, if any entry is invalid
    """
    records: list[BookRecord] = []
    errors: list[str] = []

    for index, item in enumerate(items):
        try:
            records.append(BookRecord.model_validate(item))
        except PydanticValidationError as e:
            message = f"book[{index}]: {e.error_count()} validation error(s): {e.errors()[0]['msg']}"
            if strict:
                errors.append(message)
            else:
                logger.warning("Skipping invalid book record %s", message)

    if errors:
        raise ValidationError(
            f"{len(errors)} invalid book record(s)",
            errors=errors,
        )

    return records
