"""
Tests for case restoration.
"""

import pytest

from countnoun.casing import restore_case


class TestRestoreCase:
    """Source casing style is copied onto the candidate."""

    def test_identical_text_returned_unchanged(self):
        assert restore_case("Buses", "Buses") == "Buses"

    @pytest.mark.parametrize(
        "source,candidate,expected",
        [
            ("bus", "BUSES", "buses"),
            ("BUS", "buses", "BUSES"),
            ("Bus", "buses", "Buses"),
            ("Bus", "BUSES", "Buses"),
        ],
    )
    def test_basic_styles(self, source, candidate, expected):
        assert restore_case(source, candidate) == expected

    def test_mixed_case_falls_back_to_lower(self):
        """camelCase-like sources can't be mapped, so the result is lower-cased."""
        assert restore_case("cHILD", "Children") == "children"

    def test_single_capital_letter_is_upper_case(self):
        """A lone capital letter is all upper-case, not title case."""
        assert restore_case("I", "we") == "WE"

    def test_empty_source_lower_cases(self):
        assert restore_case("", "Word") == "word"

    def test_empty_candidate(self):
        assert restore_case("Word", "") == ""

    def test_non_letters_count_as_lower_case(self):
        assert restore_case("123", "ABC") == "abc"
