"""Tests for title normalization and series identifiers."""

from __future__ import annotations

import pytest

from vshelf.utils.naming import (
    generate_series_id,
    normalize_for_id,
    normalize_string,
)


class TestNormalizeString:
    """Tests for normalize_string function."""

    def test_none_input(self) -> None:
        """None input returns empty string."""
        assert normalize_string(None) == ""

    def test_empty_string(self) -> None:
        """Empty and whitespace-only input returns empty string."""
        assert normalize_string("") == ""
        assert normalize_string("  \t ") == ""

    def test_fullwidth_alnum_to_ascii(self) -> None:
        """Full-width letters and digits become ASCII."""
        assert normalize_string("ＡＢＣａｂｃ０１２") == "ABCabc012"

    def test_brackets(self) -> None:
        """Full-width parentheses and quote brackets are unified."""
        assert normalize_string("（上）【注】「鍵」") == "(上)[注][鍵]"

    def test_ideographic_space_and_colon(self) -> None:
        """Ideographic space and full-width colon/semicolon become ASCII."""
        assert normalize_string("タイトル　：　１；") == "タイトル : 1;"

    def test_dash_variants(self) -> None:
        """All dash variants, including the long vowel mark, become '-'."""
        assert normalize_string("A－B―C─DーE−F") == "A-B-C-D-E-F"

    def test_tilde_variants(self) -> None:
        """Both tilde variants become '~'."""
        assert normalize_string("1～2〜3") == "1~2~3"

    def test_fullwidth_punctuation(self) -> None:
        """Full-width ! ? & * + , . become ASCII."""
        assert normalize_string("！？＆＊＋，．") == "!?&*+,."

    def test_collapses_whitespace(self) -> None:
        """Whitespace runs collapse and ends are trimmed."""
        assert normalize_string("  a \t b\n\n c  ") == "a b c"

    def test_bom_is_whitespace(self) -> None:
        """U+FEFF collapses and trims like any other space."""
        assert normalize_string("タイトル\ufeff1") == "タイトル 1"
        assert normalize_string("\ufeffタイトル\u2028\u3000 2\ufeff") == "タイトル 2"

    def test_information_separators_are_not_whitespace(self) -> None:
        """U+001C-U+001F are kept, both inside and at the ends."""
        assert normalize_string("a\x1fb") == "a\x1fb"
        assert normalize_string("\x1cタイトル\x1d") == "\x1cタイトル\x1d"
        assert normalize_for_id("A\x1eB") == "a\x1eb"

    def test_ascii_passes_through(self) -> None:
        """Already-normalized text is unchanged."""
        assert normalize_string("Magic Tale (Vol. 3)") == "Magic Tale (Vol. 3)"

    @pytest.mark.parametrize(
        "text",
        [
            "ドラゴン物語（３）　完結編",
            "シリーズ名 ： ２７ サブタイトル",
            "Ｔｉｔｌｅ～ＥＸ～　！？",
            "  mixed　　spaces　here ",
            "",
        ],
    )
    def test_idempotent(self, text: str) -> None:
        """Normalizing twice equals normalizing once."""
        once = normalize_string(text)
        assert normalize_string(once) == once


class TestNormalizeForId:
    """Tests for normalize_for_id function."""

    def test_none_input(self) -> None:
        """None input returns empty string."""
        assert normalize_for_id(None) == ""

    def test_case_and_punctuation_collapse(self) -> None:
        """Case, spaces and parentheses do not affect the identifier."""
        assert normalize_for_id("Title (1)") == normalize_for_id("title1") == "title1"

    def test_fullwidth_input(self) -> None:
        """Full-width input yields the same identifier as ASCII input."""
        assert normalize_for_id("Ｔｉｔｌｅ　（１）") == "title1"

    def test_japanese_punctuation_removed(self) -> None:
        """Middle dots and ideographic comma/period are stripped."""
        assert normalize_for_id("ドラゴン・物語、其の。壱!") == "ドラゴン物語其の壱"
        assert normalize_for_id("a·b") == "ab"

    def test_quotes_and_angle_brackets_removed(self) -> None:
        """Quotes, square and angle brackets are stripped."""
        assert normalize_for_id("<A> [B] 'C' \"D\"") == "abcd"

    def test_other_symbols_kept(self) -> None:
        """Symbols outside the strip set survive."""
        assert normalize_for_id("A~B&C") == "a~b&c"


class TestGenerateSeriesId:
    """Tests for generate_series_id function."""

    def test_authors_ignored(self) -> None:
        """Different author strings give the same identifier."""
        assert generate_series_id("魔法の書", "作者A") == generate_series_id("魔法の書", "作者 A, 作者B")

    def test_without_authors(self) -> None:
        """Authors argument is optional."""
        assert generate_series_id("Magic Tale") == "magictale"
