"""Data models for vshelf series detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class BookLike(Protocol):
    """Minimal shape of a book record supplied by the host application.

    Any object exposing these attributes can be grouped; see
    vshelf.schemas.book.BookRecord for the concrete model.
    """

    id: str
    title: str | None
    authors: str | None
    read_status: str | None


@dataclass(frozen=True)
class ExtractedTitle:
    """Result of splitting a title into series name and volume number."""

    normalized_title: str
    volume_number: int | None = None

    @property
    def is_series_candidate(self) -> bool:
        """True when a volume number was found."""
        return self.volume_number is not None


@dataclass(frozen=True)
class SeriesVolume:
    """One book within a series, with its parsed volume number."""

    book: BookLike
    volume_number: int | None


@dataclass
class SeriesEntry:
    """Series bucket while grouping, before the minimum-volume filter."""

    series_id: str
    series_name: str
    authors: str  # From the first book seen; author strings vary between volumes
    volumes: list[SeriesVolume] = field(default_factory=list)


@dataclass(frozen=True)
class SeriesInfo:
    """
    A detected multi-volume series.

    Volumes are ordered by volume number (un-numbered entries last) and
    the representative book is the first of them, used as the display anchor.
    """

    series_id: str
    series_name: str
    authors: str
    volumes: tuple[SeriesVolume, ...]
    representative_book: BookLike
    total_volumes: int

    @property
    def book_ids(self) -> list[str]:
        """Member book ids in volume order."""
        return [volume.book.id for volume in self.volumes]


@dataclass(frozen=True)
class SeriesProgress:
    """Read progress across the volumes of a series."""

    total: int = 0
    read: int = 0
    unread: int = 0


@dataclass(frozen=True)
class SeriesGrouping:
    """Grouping result: series list plus the book id -> series id index.

    Held by SeriesManager as one object so the list and the index are
    always replaced together.
    """

    series_list: list[SeriesInfo] = field(default_factory=list)
    book_to_series: dict[str, str] = field(default_factory=dict)
    _by_id: dict[str, SeriesInfo] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self._by_id and self.series_list:
            # Frozen dataclass: populate the private lookup in place
            self._by_id.update((series.series_id, series) for series in self.series_list)

    def get(self, series_id: str) -> SeriesInfo | None:
        """Look up a series by id, or None if unknown."""
        return self._by_id.get(series_id)
