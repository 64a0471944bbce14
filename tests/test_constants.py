"""Tests for config/constants.py: enums and configuration values."""

from config.constants import (
    AGE_MAX,
    AGE_MIN,
    FORM_FIELD_MAX_LENGTHS,
    NOTICE_TITLES,
    NoticeKind,
    ProfileOperation,
)


class TestProfileOperation:
    def test_fallback_messages(self):
        assert ProfileOperation.LIST.fallback_message == "Failed to fetch profiles"
        assert ProfileOperation.CREATE.fallback_message == "Failed to create profile"
        assert ProfileOperation.UPDATE.fallback_message == "Failed to update profile"
        assert ProfileOperation.DELETE.fallback_message == "Failed to delete profile"

    def test_is_string_enum(self):
        assert ProfileOperation.LIST == "list"


class TestNoticeTitles:
    def test_every_kind_has_title(self):
        assert set(NOTICE_TITLES) == set(NoticeKind)
        assert NOTICE_TITLES[NoticeKind.VALIDATION] == "Validation Error"


class TestLimits:
    def test_age_range(self):
        assert (AGE_MIN, AGE_MAX) == (13, 120)

    def test_form_fields(self):
        assert set(FORM_FIELD_MAX_LENGTHS) == {"first_name", "last_name", "age", "interests"}
        assert FORM_FIELD_MAX_LENGTHS["interests"] is None
