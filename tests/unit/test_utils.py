"""Tests for jobdigest.utils — text_utils."""

from __future__ import annotations

import pytest

from jobdigest.utils.text_utils import clean_whitespace, contains_any_keyword


# ── text_utils: clean_whitespace ─────────────────────────────────────────────


class TestCleanWhitespace:
    """Tests for clean_whitespace."""

    def test_collapses_spaces_and_newlines(self) -> None:
        assert clean_whitespace("  Junior\n  React\tDev  ") == "Junior React Dev"

    def test_empty_returns_empty(self) -> None:
        assert clean_whitespace("") == ""

    def test_none_returns_empty(self) -> None:
        assert clean_whitespace(None) == ""  # type: ignore[arg-type]


# ── text_utils: contains_any_keyword ─────────────────────────────────────────


class TestContainsAnyKeyword:
    """Tests for contains_any_keyword — case-insensitive substring match."""

    @pytest.mark.parametrize(
        "text",
        [
            "Junior Python Developer",
            "REACT NATIVE Engineer",
            "Fresher - Web Developer",
            "Software Engineer (0-2 years)",
        ],
    )
    def test_matches(self, text: str) -> None:
        keywords = ["junior", "react native", "fresher", "0-2 years"]
        assert contains_any_keyword(text, keywords) is True

    def test_no_match(self) -> None:
        assert contains_any_keyword("Principal Architect", ["junior"]) is False

    def test_multiline_title_matches_phrase(self) -> None:
        assert contains_any_keyword("React\nNative Dev", ["react native"]) is True

    def test_blank_keywords_ignored(self) -> None:
        assert contains_any_keyword("Anything at all", ["", "  "]) is False

    def test_empty_inputs(self) -> None:
        assert contains_any_keyword("", ["junior"]) is False
        assert contains_any_keyword("Junior Dev", []) is False
