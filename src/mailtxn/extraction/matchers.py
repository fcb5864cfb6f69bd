#!/usr/bin/env python3
"""
Specific-Pattern Matchers

Narrow, high-confidence extractors for known bank alert templates. Each
matcher is a strategy exposing ``attempt(message_id, snippet)``; the
pipeline tries them in ``SPECIFIC_MATCHERS`` order and the first match wins.
"""

import logging
import re
from dataclasses import dataclass

from ..core.models import TransactionRecord, TransactionType

logger = logging.getLogger(__name__)

AMOUNT_PREFIX = "Rs. "

# Shared fragments
_AMOUNT = r"(?:Rs\.?|INR)\s*(?P<amount>[\d,]+(?:\.\d+)?)"
_DATE = r"(?P<date>\d{2}-\d{2}-\d{2})"
_REFERENCE = r".*?(?:transaction reference number is|reference number is) (?P<reference>\d+)"


def format_amount(digits: str) -> str:
    """Normalize a captured amount to the ``Rs. <digits>`` display form."""
    return f"{AMOUNT_PREFIX}{digits}"


class TransactionMatcher:
    """Base strategy: turn a snippet into a record, or return None."""

    name: str

    def attempt(self, message_id: str, snippet: str) -> TransactionRecord | None:
        raise NotImplementedError


@dataclass(frozen=True)
class TemplateMatcher(TransactionMatcher):
    """
    Matches one complete alert template with a single regular expression.

    Named groups map directly onto record fields: ``amount``, ``account``,
    ``vpa``, ``merchant``, ``date`` and ``reference``. Groups a template
    does not define stay absent on the record.
    """

    name: str
    transaction_type: TransactionType
    pattern: re.Pattern

    def attempt(self, message_id: str, snippet: str) -> TransactionRecord | None:
        if not snippet:
            return None

        match = self.pattern.search(snippet)
        if not match:
            return None

        groups = match.groupdict()
        merchant = groups.get("merchant")

        logger.debug(f"Message {message_id} matched template {self.name}")

        return TransactionRecord(
            id=message_id,
            type=self.transaction_type,
            amount=format_amount(groups["amount"]),
            account_number=groups.get("account"),
            date=groups.get("date"),
            reference=groups.get("reference"),
            merchant=merchant.strip() if merchant is not None else None,
            vpa_id=groups.get("vpa"),
        )


UPI_DEBIT = TemplateMatcher(
    name="upi_debit",
    transaction_type=TransactionType.UPI_DEBIT,
    pattern=re.compile(
        _AMOUNT
        + r" has been debited from account (?P<account>\d+) to VPA (?P<vpa>\S+) (?P<merchant>.+?) on "
        + _DATE
        + _REFERENCE,
        re.IGNORECASE,
    ),
)

UPI_CREDIT = TemplateMatcher(
    name="upi_credit",
    transaction_type=TransactionType.UPI_CREDIT,
    pattern=re.compile(
        _AMOUNT
        + r" has been credited to your account (?P<account>\d+) from VPA (?P<vpa>\S+) (?P<merchant>.+?) on "
        + _DATE
        + _REFERENCE,
        re.IGNORECASE,
    ),
)

CARD_DEBIT = TemplateMatcher(
    name="card_debit",
    transaction_type=TransactionType.CARD_DEBIT,
    pattern=re.compile(
        _AMOUNT
        + r" has been debited from your account (?P<account>\d+) for card transaction at (?P<merchant>.+?) on "
        + _DATE
        + _REFERENCE,
        re.IGNORECASE,
    ),
)

# Evaluation order is part of the contract: first match wins
SPECIFIC_MATCHERS: tuple[TransactionMatcher, ...] = (UPI_DEBIT, UPI_CREDIT, CARD_DEBIT)


def match_specific(
    message_id: str,
    snippet: str,
    matchers: tuple[TransactionMatcher, ...] = SPECIFIC_MATCHERS,
) -> TransactionRecord | None:
    """Return the record from the first matcher that fires, or None."""
    for matcher in matchers:
        record = matcher.attempt(message_id, snippet)
        if record is not None:
            return record
    return None
