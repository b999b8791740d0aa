"""
Series detection and grouping for the virtual bookshelf.

Books whose titles carry a volume marker are bucketed by series identifier
(the strictly normalized series name); buckets with enough volumes become
series. The result is memoized per SeriesManager until clear_cache() is
called. The input is not fingerprinted, so callers must clear the cache
whenever their book collection changes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from typing import Any

from vshelf.env_settings import SeriesEnvSettings, get_env_settings
from vshelf.models import (
    BookLike,
    SeriesEntry,
    SeriesGrouping,
    SeriesInfo,
    SeriesProgress,
    SeriesVolume,
)
from vshelf.utils.naming import extract_volume, generate_series_id

logger = logging.getLogger(__name__)


def _volume_sort_key(volume: SeriesVolume) -> tuple[bool, int]:
    # Un-numbered volumes sort after every numbered one
    if volume.volume_number is None:
        return (True, 0)
    return (False, volume.volume_number)


class SeriesManager:
    """
    Detects series in a book collection and serves lookups over the result.

    Each instance owns its own cache, so independent managers (e.g. per test
    or per library) never share state.

    Example:
        manager = SeriesManager()
        grouping = manager.detect_and_group_series(books)
        series = manager.get_series_by_book_id(books[0].id)
        progress = manager.get_series_progress(series)
    """

    def __init__(self, settings: SeriesEnvSettings | None = None) -> None:
        self.settings = settings or get_env_settings().series
        self._lock = threading.Lock()
        self._grouping = SeriesGrouping()
        self._cache_valid = False

    @property
    def cache_valid(self) -> bool:
        """Whether the cached grouping is still authoritative."""
        return self._cache_valid

    @property
    def series_count(self) -> int:
        """Number of series in the cached grouping."""
        return len(self._grouping.series_list)

    def detect_and_group_series(self, books: Iterable[BookLike]) -> SeriesGrouping:
        """
        Detect series in books and build the book -> series index.

        Returns the cached grouping unchanged while the cache is valid and
        non-empty, even if books differs from the collection it was built from.

        Args:
            books: Book records (never mutated)

        Returns:
            SeriesGrouping with the series list and the book id -> series id index
        """
        with self._lock:
            if self._cache_valid and self._grouping.series_list:
                return self._grouping

            grouping = self._build_grouping(books)
            self._grouping = grouping
            self._cache_valid = True
            return grouping

    def _build_grouping(self, books: Iterable[BookLike]) -> SeriesGrouping:
        buckets: dict[str, SeriesEntry] = {}
        scanned = 0

        for book in books:
            scanned += 1
            if not book.title or not book.authors:
                continue

            extracted = extract_volume(book.title)
            if extracted.volume_number is None:
                continue

            series_id = generate_series_id(extracted.normalized_title, book.authors)
            entry = buckets.get(series_id)
            if entry is None:
                entry = SeriesEntry(
                    series_id=series_id,
                    series_name=extracted.normalized_title,
                    authors=book.authors,
                )
                buckets[series_id] = entry
            entry.volumes.append(SeriesVolume(book=book, volume_number=extracted.volume_number))

        series_list: list[SeriesInfo] = []
        book_to_series: dict[str, str] = {}

        for series_id, entry in buckets.items():
            if len(entry.volumes) < self.settings.min_series_volumes:
                continue

            volumes = tuple(sorted(entry.volumes, key=_volume_sort_key))
            series_list.append(
                SeriesInfo(
                    series_id=series_id,
                    series_name=entry.series_name,
                    authors=entry.authors,
                    volumes=volumes,
                    representative_book=volumes[0].book,
                    total_volumes=len(volumes),
                )
            )
            for volume in volumes:
                book_to_series[volume.book.id] = series_id

        logger.debug(
            "Detected %d series (%d books grouped) from %d books, %d candidate groups",
            len(series_list),
            len(book_to_series),
            scanned,
            len(buckets),
        )
        return SeriesGrouping(series_list=series_list, book_to_series=book_to_series)

    def get_series_by_id(self, series_id: str) -> SeriesInfo | None:
        """Look up a series in the current cache; None if unknown."""
        return self._grouping.get(series_id)

    def get_series_by_book_id(self, book_id: str) -> SeriesInfo | None:
        """Look up the series a book belongs to; None if it is not in one."""
        grouping = self._grouping
        series_id = grouping.book_to_series.get(book_id)
        if not series_id:
            return None
        return grouping.get(series_id)

    def get_series_progress(self, series: SeriesInfo | Any) -> SeriesProgress:
        """
        Count read and unread volumes of a series.

        A volume is read when its book's read_status equals the configured
        read marker, case-insensitively. Never raises: None, an object without
        a volumes sequence, or malformed volume entries count as zero or unread.
        """
        volumes = getattr(series, "volumes", None)
        if not isinstance(volumes, Sequence) or isinstance(volumes, str) or not volumes:
            return SeriesProgress()

        total = len(volumes)
        read = 0
        for volume in volumes:
            book = getattr(volume, "book", None)
            status = getattr(book, "read_status", None)
            if isinstance(status, str) and status.lower() == self.settings.read_status:
                read += 1

        return SeriesProgress(total=total, read=read, unread=total - read)

    def standalone_books(self, books: Sequence[BookLike]) -> list[BookLike]:
        """Books not part of any series in the current cache, in input order."""
        index = self._grouping.book_to_series
        return [book for book in books if book.id not in index]

    def clear_cache(self) -> None:
        """Drop the cached grouping; the next detection call rebuilds it."""
        with self._lock:
            self._grouping = SeriesGrouping()
            self._cache_valid = False
        logger.debug("Series cache cleared")
