"""
Transaction Extraction Package

Turns bank-alert email snippets into transaction records.

Key Components:
- noise_filter: drops OTP, verification-code and greeting messages
- matchers: ordered specific templates (UPI debit, UPI credit, card debit)
- generic: field-by-field fallback with the HDFC UPI refine step
- pipeline: orchestration, unparsed fallback and run summaries

Precedence is fixed: noise filter, then specific matchers in
SPECIFIC_MATCHERS order, then the generic extractor, then UnparsedRecord.
"""

from .generic import GenericExtractor, extract_generic
from .matchers import (
    CARD_DEBIT,
    SPECIFIC_MATCHERS,
    UPI_CREDIT,
    UPI_DEBIT,
    TemplateMatcher,
    TransactionMatcher,
    format_amount,
    match_specific,
)
from .noise_filter import NOISE_SIGNATURES, NoiseFilter, should_filter_out
from .pipeline import ExtractionSummary, TransactionPipeline, extract_transactions

__all__ = [
    # Filter
    "NOISE_SIGNATURES",
    "NoiseFilter",
    "should_filter_out",
    # Specific matchers
    "CARD_DEBIT",
    "SPECIFIC_MATCHERS",
    "TemplateMatcher",
    "TransactionMatcher",
    "UPI_CREDIT",
    "UPI_DEBIT",
    "format_amount",
    "match_specific",
    # Generic extractor
    "GenericExtractor",
    "extract_generic",
    # Pipeline
    "ExtractionSummary",
    "TransactionPipeline",
    "extract_transactions",
]
