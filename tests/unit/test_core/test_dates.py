#!/usr/bin/env python3
"""Tests for internalDate conversion."""

from datetime import datetime, timezone

import pytest

from mailtxn.core.dates import UNKNOWN_DATE, format_internal_date, parse_internal_date


class TestParseInternalDate:
    """Test parse_internal_date."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1752537600000", datetime(2025, 7, 15, tzinfo=timezone.utc)),
            (1752537600000, datetime(2025, 7, 15, tzinfo=timezone.utc)),
            ("0", datetime(1970, 1, 1, tzinfo=timezone.utc)),
        ],
        ids=["string", "int", "epoch"],
    )
    def test_valid_values(self, value, expected):
        assert parse_internal_date(value) == expected

    @pytest.mark.parametrize("value", [None, "", "not-a-number", "12.5"], ids=["none", "empty", "text", "float"])
    def test_invalid_values(self, value):
        assert parse_internal_date(value) is None


class TestFormatInternalDate:
    """Test format_internal_date."""

    def test_formats_iso_date(self):
        assert format_internal_date("1752537600000") == "2025-07-15"

    def test_uses_utc_day(self):
        # 2025-07-15 23:30 UTC
        assert format_internal_date(str(1752537600000 + 23 * 3600 * 1000 + 30 * 60 * 1000)) == "2025-07-15"

    def test_missing_value_is_unknown(self):
        assert format_internal_date(None) == UNKNOWN_DATE
        assert UNKNOWN_DATE == "Unknown"
