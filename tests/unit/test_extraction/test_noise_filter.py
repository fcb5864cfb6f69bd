#!/usr/bin/env python3
"""Tests for the noise filter."""

import re

import pytest

from mailtxn.core.models import RawMessage
from mailtxn.extraction import NoiseFilter, should_filter_out
from tests.fixtures.alert_samples import OTP_SNIPPET, UPI_DEBIT_SNIPPET, make_message


@pytest.mark.unit
@pytest.mark.extraction
class TestNoiseSignatures:
    """Test the built-in noise signatures."""

    @pytest.mark.parametrize(
        "snippet",
        [
            OTP_SNIPPET,
            "otp is 1234",
            "Your One Time Password for login is 998877",
            "Use verification code 5521 to continue",
            "Your SECURITY CODE is 4410",
            "Dear Customer, Greetings from HDFC Bank! Enjoy cashback on your card",
        ],
        ids=["otp_prefix", "otp_lowercase", "one_time_password", "verification_code", "security_code", "greeting"],
    )
    def test_noise_is_filtered(self, snippet):
        """Each signature drops the message regardless of case."""
        assert should_filter_out(make_message("m1", snippet)) is True

    def test_otp_only_matches_at_start(self):
        """'otp is' later in the snippet is not treated as noise."""
        snippet = "Rs.10 paid. Your otp is never shared by the bank"
        assert should_filter_out(make_message("m1", snippet)) is False

    def test_transaction_alert_passes(self):
        """A regular transaction alert is kept."""
        assert should_filter_out(make_message("m1", UPI_DEBIT_SNIPPET)) is False

    def test_accepts_raw_message(self):
        """RawMessage instances are checked like provider dicts."""
        assert should_filter_out(RawMessage(id="m1", snippet=OTP_SNIPPET)) is True
        assert should_filter_out(RawMessage(id="m2", snippet=UPI_DEBIT_SNIPPET)) is False


@pytest.mark.unit
@pytest.mark.extraction
class TestMissingInput:
    """Absent messages and empty snippets are always dropped."""

    def test_none_message_is_filtered(self):
        assert should_filter_out(None) is True

    def test_missing_snippet_is_filtered(self):
        assert should_filter_out(make_message("m1", None)) is True

    def test_empty_snippet_is_filtered(self):
        assert should_filter_out(make_message("m1", "")) is True

    def test_non_message_value_is_filtered(self):
        assert should_filter_out("just a string") is True

    @pytest.mark.parametrize("snippet", [12345, ["Rs. 500 debited"], {"text": "x"}], ids=["int", "list", "dict"])
    def test_non_string_snippet_is_filtered(self, snippet):
        assert should_filter_out({"id": "m1", "snippet": snippet}) is True

    def test_message_without_id_is_filtered(self):
        assert should_filter_out({"snippet": UPI_DEBIT_SNIPPET}) is True
        assert should_filter_out(make_message("", UPI_DEBIT_SNIPPET)) is True
        assert should_filter_out(RawMessage(id="", snippet=UPI_DEBIT_SNIPPET)) is True

    def test_whitespace_snippet_is_kept(self):
        """A whitespace-only snippet is still a snippet; it falls through to extraction."""
        assert should_filter_out(make_message("m1", "   ")) is False


@pytest.mark.unit
@pytest.mark.extraction
class TestCustomFilter:
    """Test extending the signature list."""

    def test_extend_adds_signature(self):
        """Extra signatures are applied to the lower-cased snippet."""
        noise_filter = NoiseFilter().extend(r"statement is ready")
        message = make_message("m1", "Your Statement is ready to view")

        assert noise_filter.should_filter_out(message) is True
        assert should_filter_out(message) is False

    def test_extend_keeps_original_signatures(self):
        noise_filter = NoiseFilter().extend(re.compile(r"newsletter"))
        assert noise_filter.should_filter_out(make_message("m1", OTP_SNIPPET)) is True

    def test_empty_signature_list_keeps_everything_with_a_snippet(self):
        noise_filter = NoiseFilter(signatures=())
        assert noise_filter.should_filter_out(make_message("m1", OTP_SNIPPET)) is False
        assert noise_filter.should_filter_out(None) is True
