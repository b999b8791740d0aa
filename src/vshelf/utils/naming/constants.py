"""
Constants used across naming modules.

Contains the fixed tables and patterns used for:
- Full-width / half-width text normalization
- Series identifier normalization
- Volume number extraction
"""

from __future__ import annotations

import re

# =============================================================================
# Text Normalization
# =============================================================================

# Offset between full-width forms (U+FF01..U+FF5E) and ASCII
FULLWIDTH_OFFSET = 0xFEE0

# Full-width Latin letters and digits, shifted down by FULLWIDTH_OFFSET
_FULLWIDTH_ALNUM_RANGES = (
    ("Ａ", "Ｚ"),
    ("ａ", "ｚ"),
    ("０", "９"),
)

# Symbol replacements, grouped in normalization order.
# All keys are distinct and all values are ASCII, so they compose into one table.
NORMALIZE_CHAR_MAP: dict[str, str] = {
    # Brackets
    "（": "(",
    "）": ")",
    "【": "[",
    "】": "]",
    "「": "[",
    "」": "]",
    # Ideographic space
    "　": " ",
    # Colon / semicolon
    "：": ":",
    "；": ";",
    # Dashes and the katakana long vowel mark
    "－": "-",
    "―": "-",
    "─": "-",
    "ー": "-",
    "−": "-",
    # Tildes
    "～": "~",
    "〜": "~",
    # Other full-width punctuation
    "！": "!",
    "？": "?",
    "＆": "&",
    "＊": "*",
    "＋": "+",
    "，": ",",
    "．": ".",
}

NORMALIZE_TRANSLATION: dict[int, str] = {
    **{
        code: chr(code - FULLWIDTH_OFFSET)
        for start, end in _FULLWIDTH_ALNUM_RANGES
        for code in range(ord(start), ord(end) + 1)
    },
    **{ord(src): dst for src, dst in NORMALIZE_CHAR_MAP.items()},
}

# ECMAScript WhiteSpace + LineTerminator. Differs from Python's \s: includes U+FEFF,
# excludes the \x1c-\x1f separators. Regex text for use inside a character class.
WS_CLASS_BODY = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# The same set as literal characters, for str.strip()
WHITESPACE_CHARS = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def compile_ws(pattern: str, flags: int = 0) -> re.Pattern[str]:
    r"""Compile a pattern whose `[\s]` classes mean WS_CLASS_BODY.

    Patterns write whitespace only inside brackets (`[\s]*`, `[^0-9\s]`),
    so one textual substitution covers both positive and negated uses.
    """
    return re.compile(pattern.replace(r"\s", WS_CLASS_BODY), flags)


WHITESPACE_PATTERN = compile_ws(r"[\s]+")

# Characters removed when building a series identifier (after lower-casing)
ID_STRIP_CHARS: frozenset[str] = frozenset("-:;·・、。,.!?'\"()[]<>")
ID_STRIP_PATTERN = compile_ws(r"[\s]")

# =============================================================================
# Volume Extraction
# =============================================================================

# Positional markers (first/middle/last) and kanji numerals 1-10
KANJI_VOLUME_MAP: dict[str, int] = {
    "上": 1,
    "中": 2,
    "下": 3,
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
    "十": 10,
}

# Leading "番外編N巻 title" (extra volume N)
EXTRA_VOLUME_PREFIX_PATTERN = compile_ws(r"^番外編([0-9]+)巻[\s]+(.+)$")

# Leading "22~24 title" / "22-24 title" (volume range, start is the volume)
RANGE_PREFIX_PATTERN = compile_ws(r"^([0-9]+)[~\-][0-9]+[\s]+(.+)$")

# Separators left dangling once the volume suffix is cut off
TRAILING_SEPARATOR_PATTERN = compile_ws(r"[\s:;\-~]+$")
