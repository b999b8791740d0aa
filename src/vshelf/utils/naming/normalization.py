"""
Title normalization for series matching.

Two levels:
- normalize_string(): display-safe form (full-width → half-width, unified
  brackets/dashes/tildes, collapsed whitespace)
- normalize_for_id(): stricter comparison key (lower-cased, punctuation and
  spaces removed) so titles differing only in punctuation or case collide
"""

from __future__ import annotations

from vshelf.utils.naming.constants import (
    ID_STRIP_CHARS,
    ID_STRIP_PATTERN,
    NORMALIZE_TRANSLATION,
    WHITESPACE_CHARS,
    WHITESPACE_PATTERN,
)


def normalize_string(text: str | None) -> str:
    """
    Normalize width, punctuation and whitespace.

    - Full-width letters/digits → ASCII: "ＡＢＣ１２" → "ABC12"
    - Brackets: "（）" → "()", "【】" / "「」" → "[]"
    - Ideographic space → " "
    - "：" / "；" → ":" / ";"
    - Dash variants (including "ー") → "-"
    - "～" / "〜" → "~"
    - Full-width ! ? & * + , . → ASCII
    - Whitespace runs collapsed to one space, ends trimmed. Whitespace is the
      ECMAScript set: U+FEFF counts, U+001C-U+001F do not

    Idempotent: normalize_string(normalize_string(s)) == normalize_string(s).

    Args:
        text: Text to normalize (None allowed)

    Returns:
        Normalized text, or "" for empty input
    """
    if not text:
        return ""

    result = text.translate(NORMALIZE_TRANSLATION)
    return WHITESPACE_PATTERN.sub(" ", result).strip(WHITESPACE_CHARS)


def normalize_for_id(text: str | None) -> str:
    """
    Build a comparison key from text.

    Applies normalize_string(), lower-cases, then removes whitespace and
    the punctuation in ID_STRIP_CHARS.

    Example:
        normalize_for_id("Title (1)") == normalize_for_id("title1") == "title1"
    """
    if not text:
        return ""

    lowered = normalize_string(text).lower()
    stripped = "".join(ch for ch in lowered if ch not in ID_STRIP_CHARS)
    return ID_STRIP_PATTERN.sub("", stripped)


def generate_series_id(normalized_title: str, authors: str | None = None) -> str:
    """
    Generate the series identifier for a series name.

    Only the title participates: author strings vary too much between
    volumes of the same series ("A / B" vs "A, B", romanized vs native).

    Args:
        normalized_title: Series name with the volume marker removed
        authors: Accepted for call-site symmetry; not used

    Returns:
        Series identifier
    """
    return normalize_for_id(normalized_title)
