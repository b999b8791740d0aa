"""Pydantic schemas for validating host-supplied data."""

from __future__ import annotations

from vshelf.schemas.book import BookRecord, validate_book_records

__all__ = [
    "BookRecord",
    "validate_book_records",
]
