"""vshelf - Series detection for a virtual bookshelf."""

from vshelf.exceptions import (
    ConfigurationError,
    ValidationError,
    VshelfError,
)
from vshelf.models import (
    BookLike,
    ExtractedTitle,
    SeriesGrouping,
    SeriesInfo,
    SeriesProgress,
    SeriesVolume,
)
from vshelf.schemas.book import BookRecord, validate_book_records
from vshelf.series import SeriesManager
from vshelf.utils.naming import (
    extract_volume,
    generate_series_id,
    normalize_for_id,
    normalize_string,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "VshelfError",
    "ConfigurationError",
    "ValidationError",
    # Models
    "BookLike",
    "BookRecord",
    "ExtractedTitle",
    "SeriesGrouping",
    "SeriesInfo",
    "SeriesProgress",
    "SeriesVolume",
    # Series detection
    "SeriesManager",
    "validate_book_records",
    # Naming
    "extract_volume",
    "generate_series_id",
    "normalize_for_id",
    "normalize_string",
]
