"""
Title naming utilities for series detection.

This module provides a unified API for:
- Width/punctuation normalization of titles
- Series identifier generation
- Volume number extraction

All public functions are re-exported from submodules.
"""

from __future__ import annotations

from vshelf.utils.naming.constants import (
    ID_STRIP_CHARS,
    KANJI_VOLUME_MAP,
    NORMALIZE_CHAR_MAP,
)
from vshelf.utils.naming.normalization import (
    generate_series_id,
    normalize_for_id,
    normalize_string,
)
from vshelf.utils.naming.volume_parsing import (
    VOLUME_RULES,
    VolumeRule,
    clean_series_name,
    extract_volume,
    parse_volume_token,
)

__all__ = [
    # Constants module
    "ID_STRIP_CHARS",
    "KANJI_VOLUME_MAP",
    "NORMALIZE_CHAR_MAP",
    # Normalization module
    "generate_series_id",
    "normalize_for_id",
    "normalize_string",
    # Volume parsing module
    "VOLUME_RULES",
    "VolumeRule",
    "clean_series_name",
    "extract_volume",
    "parse_volume_token",
]
