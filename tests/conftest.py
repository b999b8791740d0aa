"""Shared pytest fixtures and helpers for vshelf tests."""

from __future__ import annotations

import pytest

from vshelf.env_settings import SeriesEnvSettings
from vshelf.schemas.book import BookRecord
from vshelf.series import SeriesManager


def make_book(
    book_id: str,
    title: str | None,
    authors: str | None = "作者A",
    read_status: str | None = None,
) -> BookRecord:
    """Create a BookRecord for grouping tests.

    Args:
        book_id: Unique book id (ASIN in the host).
        title: Book title.
        authors: Authors string.
        read_status: Optional read status ("Read", "Unread", ...).

    Returns:
        BookRecord with the specified values.
    """
    return BookRecord(id=book_id, title=title, authors=authors, read_status=read_status)


@pytest.fixture
def manager() -> SeriesManager:
    """Fresh SeriesManager with default settings, independent of the environment."""
    return SeriesManager(settings=SeriesEnvSettings(min_series_volumes=2, read_status="read"))
