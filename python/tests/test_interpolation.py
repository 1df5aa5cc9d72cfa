"""
Tests for replacement template expansion.
"""

import re

from countnoun.interpolation import interpolate, match_captures


class TestInterpolate:
    """$N placeholders are replaced from the capture list."""

    def test_group_reference(self):
        assert interpolate("$1ies", ["fly", "fl"]) == "flies"

    def test_whole_match_reference(self):
        assert interpolate("$0", ["sheep"]) == "sheep"

    def test_missing_group_expands_to_empty(self):
        assert interpolate("$1$2ves", ["wolf", None, "wol"]) == "wolves"

    def test_index_past_end_expands_to_empty(self):
        assert interpolate("a$5b", ["x"]) == "ab"

    def test_two_digit_index(self):
        captures = [str(i) for i in range(12)]
        assert interpolate("<$11>", captures) == "<11>"

    def test_only_two_digits_are_consumed(self):
        captures = [str(i) for i in range(12)]
        assert interpolate("$100", captures) == "100"

    def test_plain_text_passes_through(self):
        assert interpolate("men", ["man"]) == "men"
        assert interpolate("$x costs $", ["a"]) == "$x costs $"


class TestMatchCaptures:
    """Capture list built from a regex match."""

    def test_whole_match_then_groups(self):
        match = re.search(r"(?:(kni|wi|li)fe|(ar|l)f)$", "wolf")
        assert match_captures(match) == ["lf", None, "l"]

    def test_no_groups(self):
        match = re.search(r"men$", "women")
        assert match_captures(match) == ["men"]

    def test_captures_sliced_from_source(self):
        match = re.search(r"(?:(kni|wi|li)fe|(ar|l)f)$", "wolf")
        assert match_captures(match, "WoLF") == ["LF", None, "L"]
