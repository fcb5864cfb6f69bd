#!/usr/bin/env python3
"""
Generic Transaction Extractor

Low-precision fallback used when no specific template matches. Every field
is extracted on its own with an ordered list of patterns (first match wins),
then a final refine step lets the HDFC UPI composite pattern overwrite the
independent results, and the candidate is kept only if it is confident
enough: an amount plus a date or a reference.
"""

import logging
import re
from typing import Any

from ..core.models import TransactionRecord, TransactionType, coerce_message
from .matchers import format_amount
from .noise_filter import DEFAULT_FILTER, NoiseFilter

logger = logging.getLogger(__name__)

_VPA = r"[^\s]+@[^\s]+"

AMOUNT_PATTERNS = (re.compile(r"(?:Rs\.?|INR)\s*([\d,]+\.?\d*)", re.IGNORECASE),)

ACCOUNT_PATTERNS = (
    re.compile(r"(?:account|a/c|ac)\s*(?:no\.?|number|#)?\s*(?:[Xx*]+)?(\d+)", re.IGNORECASE),
    re.compile(r"(?:from|to)\s*(?:account|a/c)?\s*(?:[Xx*]+)?(\d+)", re.IGNORECASE),
)

DATE_PATTERNS = (
    re.compile(r"(?:on|dated)\s*(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})", re.IGNORECASE),
    re.compile(r"(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})"),
)

REFERENCE_PATTERNS = (
    re.compile(r"(?:ref(?:erence)?|txn|transaction).{1,15}?(?:no|num|number|id).{0,10}?(\d+)", re.IGNORECASE),
    re.compile(r"(?:ref(?:erence)?|txn|transaction).{0,5}?(?:#|:).{0,5}?(\d+)", re.IGNORECASE),
)

DEBIT_KEYWORDS = re.compile(r"debited|paid|sent|withdrawn|purchase|spent", re.IGNORECASE)
CREDIT_KEYWORDS = re.compile(r"credited|received|added|deposited", re.IGNORECASE)

# Two-group patterns yield (vpa, merchant); one-group patterns yield merchant only
MERCHANT_PATTERNS = (
    re.compile(rf"(?:to|at)\s+(?:VPA\s+)?({_VPA})\s+([^.]{{5,}}?)(?:\s+on|\.|$)", re.IGNORECASE),
    re.compile(rf"(?:to|at)\s+(?:VPA\s+)?({_VPA})", re.IGNORECASE),
    # case-sensitive name class: only a genuine all-caps run qualifies
    re.compile(r"(?i:to|at)\s+([A-Z\s]{5,})"),
    re.compile(r"(?:to|at)\s+([^.]{5,}?)(?:\s+on|\.|$)", re.IGNORECASE),
)

VPA_PATTERNS = (re.compile(rf"(?:VPA|UPI\s+ID)\s+({_VPA})", re.IGNORECASE),)

HDFC_UPI_DEBIT = re.compile(
    r"debited from account (\d+) to VPA ([^\s]+) (.+?) on (\d{2}-\d{2}-\d{2})"
    r".*?(?:reference number is|transaction reference number is) (\d+)",
    re.IGNORECASE,
)


def first_match(patterns: tuple[re.Pattern, ...], text: str) -> re.Match | None:
    """Return the match of the first pattern that matches ``text``."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match
    return None


def _first_group(patterns: tuple[re.Pattern, ...], text: str) -> str | None:
    match = first_match(patterns, text)
    return match.group(1) if match else None


def extract_amount(snippet: str) -> str | None:
    digits = _first_group(AMOUNT_PATTERNS, snippet)
    return format_amount(digits) if digits is not None else None


def extract_account_number(snippet: str) -> str | None:
    return _first_group(ACCOUNT_PATTERNS, snippet)


def extract_date(snippet: str) -> str | None:
    return _first_group(DATE_PATTERNS, snippet)


def extract_reference(snippet: str) -> str | None:
    return _first_group(REFERENCE_PATTERNS, snippet)


def classify_type(snippet: str) -> TransactionType:
    """Debit keywords take precedence over credit keywords."""
    if DEBIT_KEYWORDS.search(snippet):
        return TransactionType.DEBIT
    if CREDIT_KEYWORDS.search(snippet):
        return TransactionType.CREDIT
    return TransactionType.UNKNOWN


def extract_counterparty(snippet: str) -> tuple[str | None, str | None]:
    """
    Extract the merchant and, when present alongside it, the VPA.

    Returns:
        (merchant, vpa_id) tuple; either may be None
    """
    match = first_match(MERCHANT_PATTERNS, snippet)
    if not match:
        return None, None

    if match.re.groups > 1 and match.group(2):
        return match.group(2).strip(), match.group(1)

    return match.group(1).strip(), None


def extract_vpa(snippet: str) -> str | None:
    return _first_group(VPA_PATTERNS, snippet)


class GenericExtractor:
    """Field-by-field fallback extractor with an explicit refine step."""

    def __init__(self, noise_filter: NoiseFilter = DEFAULT_FILTER):
        self.noise_filter = noise_filter

    def extract_fields(self, message_id: str, snippet: str) -> TransactionRecord:
        """Run every independent field pass and assemble the candidate record."""
        merchant, vpa_id = extract_counterparty(snippet)
        if vpa_id is None:
            vpa_id = extract_vpa(snippet)

        return TransactionRecord(
            id=message_id,
            type=classify_type(snippet),
            amount=extract_amount(snippet),
            account_number=extract_account_number(snippet),
            date=extract_date(snippet),
            reference=extract_reference(snippet),
            merchant=merchant,
            vpa_id=vpa_id,
        )

    def refine(self, record: TransactionRecord, snippet: str) -> TransactionRecord:
        """
        Apply the HDFC UPI composite pattern on top of the independent fields.

        When it matches, its captures overwrite type, account, VPA, merchant,
        date and reference; the amount is left alone.
        """
        match = HDFC_UPI_DEBIT.search(snippet)
        if not match:
            return record

        logger.debug(f"Message {record.id}: HDFC UPI composite pattern overrides generic fields")
        account, vpa_id, merchant, date, reference = match.groups()
        return record.with_fields(
            type=TransactionType.UPI_DEBIT,
            account_number=account,
            vpa_id=vpa_id,
            merchant=merchant.strip(),
            date=date,
            reference=reference,
        )

    def attempt(self, message: Any) -> TransactionRecord | None:
        """
        Extract a transaction from ``message`` or return None.

        The noise filter is checked again here so direct calls that bypass
        the pipeline get the same treatment.
        """
        if self.noise_filter.should_filter_out(message):
            return None

        raw = coerce_message(message)
        snippet = raw.snippet

        record = self.refine(self.extract_fields(raw.id, snippet), snippet)

        if not record.is_confident:
            logger.debug(
                f"Message {raw.id}: rejected generic candidate "
                f"(amount={record.amount!r}, date={record.date!r}, reference={record.reference!r})"
            )
            return None

        return record


DEFAULT_GENERIC_EXTRACTOR = GenericExtractor()


def extract_generic(message: Any) -> TransactionRecord | None:
    """Run the default generic extractor on ``message``."""
    return DEFAULT_GENERIC_EXTRACTOR.attempt(message)
