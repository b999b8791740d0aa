"""
Volume number extraction from book titles.

Splits a title into a series name and a volume number:
- Prefix markers: "番外編3巻 タイトル", "22~24 タイトル"
- Counter suffixes: "タイトル 第3巻", "タイトル 3巻", "タイトル 第5話..."
- Latin markers: "Title Vol.3", "Title (vol 3)"
- Parenthesized numbers: "タイトル(1)", "タイトル(11) 副題", "タイトル(8)副題"
- Bare trailing numbers: "タイトル 1", "大長編タイトル8 副題 (レーベル)"
- Triptych markers and kanji numerals: "タイトル 上", "タイトル 一ノ巻"
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from vshelf.models import ExtractedTitle
from vshelf.utils.naming.constants import (
    EXTRA_VOLUME_PREFIX_PATTERN,
    KANJI_VOLUME_MAP,
    RANGE_PREFIX_PATTERN,
    TRAILING_SEPARATOR_PATTERN,
    WHITESPACE_CHARS,
    compile_ws,
)
from vshelf.utils.naming.normalization import normalize_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VolumeRule:
    """A named volume pattern: group 1 is the series name, group 2 the volume token."""

    name: str
    pattern: re.Pattern[str]

    def match(self, title: str) -> re.Match[str] | None:
        return self.pattern.match(title)


# Priority order matters: labeled/anchored forms must be tried before the
# permissive trailing-number forms, otherwise "タイトル(1) (レーベル)" would
# be split at the wrong place. First match wins.
# Whitespace is written as [\s] so compile_ws() can swap in the JS set.
VOLUME_RULES: tuple[VolumeRule, ...] = (
    VolumeRule("counter", compile_ws(r"^(.+?)[\s]*\(?第?([0-9]+)巻\)?[\s]*$")),
    VolumeRule("counter_with_subtitle", compile_ws(r"^(.+?)[\s]+第?([0-9]+)巻[\s]*.*$")),
    VolumeRule("ordinal_counter", compile_ws(r"^(.+?)[\s]*第([0-9]+)巻[\s]*$")),
    VolumeRule("chapter", compile_ws(r"^(.+?)[\s]+第([0-9]+)話.+$")),
    VolumeRule(
        "vol",
        compile_ws(r"^(.+?)[\s]*\(?Vol\.?[\s]*([0-9]+)\)?[\s]*$", re.IGNORECASE),
    ),
    VolumeRule("split_edition", compile_ws(r"^(.+?)[\s]+分冊版([0-9]+)[\s]*$")),
    VolumeRule("colon", compile_ws(r"^(.+?)[\s]*:[\s]*([0-9]+)[\s]+.+$")),
    VolumeRule("paren_then_label", compile_ws(r"^(.+?)\(([0-9]+)\)[\s]+\(.+\)[\s]*$")),
    VolumeRule("paren_then_subtitle", compile_ws(r"^(.+?)\(([0-9]+)\)[\s]+.+$")),
    VolumeRule("paren_glued_subtitle", compile_ws(r"^(.+?)\(([0-9]+)\)[^\s].+$")),
    VolumeRule(
        "glued_number_subtitle_label",
        compile_ws(r"^(.+?[^0-9\s])([0-9]+)[\s]+.+[\s]*\(.+\)[\s]*$"),
    ),
    VolumeRule("trailing_paren", compile_ws(r"^(.+?)[\s]*\(([0-9]+)\)[\s]*$")),
    VolumeRule(
        "number_then_paren_subtitle",
        compile_ws(r"^(.+?)[\s]+([0-9]+)[\s]*\(.+\)[\s]*$"),
    ),
    VolumeRule("trailing_number", compile_ws(r"^(.+?)[\s]+([0-9]+)[\s]*$")),
    VolumeRule("number_after_paren", compile_ws(r"^(.+?\))([0-9]+)$")),
    VolumeRule("triptych", compile_ws(r"^(.+?)[\s]*\(?(上|中|下)\)?[\s]*$")),
    VolumeRule(
        "kanji_numeral",
        compile_ws(r"^(.+?)[\s]+(一|二|三|四|五|六|七|八|九|十)[ノの]巻[\s]*$"),
    ),
)


def parse_volume_token(token: str) -> int:
    """
    Resolve a captured volume token to an integer.

    Kanji numerals and 上/中/下 go through KANJI_VOLUME_MAP;
    anything else is parsed as base-10.
    """
    if token in KANJI_VOLUME_MAP:
        return KANJI_VOLUME_MAP[token]
    return int(token, 10)


def clean_series_name(name: str) -> str:
    """Trim a captured series name and drop dangling separators (": ; - ~")."""
    trimmed = name.strip(WHITESPACE_CHARS)
    return TRAILING_SEPARATOR_PATTERN.sub("", trimmed).strip(WHITESPACE_CHARS)


def extract_volume(title: str | None) -> ExtractedTitle:
    """
    Extract the volume number and bare series name from a title.

    Args:
        title: Raw book title (None or empty allowed)

    Returns:
        ExtractedTitle; volume_number is None when no volume marker matched,
        in which case normalized_title is the whole normalized title.

    Examples:
        "ドラゴン物語(3) 完結編"        → ("ドラゴン物語", 3)
        "大長編タイトル8 副題 (レーベル)" → ("大長編タイトル", 8)
        "22~24 タイトル"               → ("タイトル", 22)
        "独立した本"                   → ("独立した本", None)
    """
    if not title:
        return ExtractedTitle(normalized_title="", volume_number=None)

    normalized = normalize_string(title)

    # Prefix markers anchor the volume at the start, which no trailing rule handles
    for prefix_pattern in (EXTRA_VOLUME_PREFIX_PATTERN, RANGE_PREFIX_PATTERN):
        prefix_match = prefix_pattern.match(normalized)
        if prefix_match:
            return ExtractedTitle(
                normalized_title=prefix_match.group(2).strip(WHITESPACE_CHARS),
                volume_number=int(prefix_match.group(1), 10),
            )

    for rule in VOLUME_RULES:
        match = rule.match(normalized)
        if match:
            volume_number = parse_volume_token(match.group(2))
            series_name = clean_series_name(match.group(1))
            logger.debug(
                "Volume %d from %r via %s (series %r)",
                volume_number,
                normalized,
                rule.name,
                series_name,
            )
            return ExtractedTitle(normalized_title=series_name, volume_number=volume_number)

    return ExtractedTitle(normalized_title=normalized, volume_number=None)
