"""Tests for utils/formatting.py: profile list formatting."""

from models.profile import Profile
from utils.formatting import format_age, format_interests, format_profile, truncate


class TestFormatProfile:
    def test_with_interests(self):
        p = Profile(id="1", first_name="Ann", last_name="Lee", age=30, interests=["reading", "chess"])
        assert format_profile(p) == "Ann Lee | Age: 30 | Interests: reading, chess"

    def test_without_interests(self):
        p = Profile(id="1", first_name="Bob", last_name="Stone", age=45)
        assert format_profile(p) == "Bob Stone | Age: 45"

    def test_missing_age(self):
        assert format_age(None) == "N/A"
        assert format_age(13) == "13"

    def test_format_interests(self):
        assert format_interests([]) == ""
        assert format_interests(["go"]) == "go"


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("hello", 10) == "hello"

    def test_exact_length(self):
        assert truncate("hello", 5) == "hello"

    def test_long_text_truncated(self):
        result = truncate("hello world", 8)
        assert result == "hello..."
        assert len(result) == 8
