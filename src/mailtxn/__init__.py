"""
mailtxn - Bank Alert Transaction Extraction

Extracts structured transaction records from bank-alert email snippets
returned by the Gmail API.

Domain Packages:
- core: Data models, configuration, date and JSON helpers
- extraction: Noise filter, specific matchers, generic extractor, pipeline
- gmail: Query construction and message fetching
- cli: Command-line interface

Example Usage:
    from mailtxn import extract_transactions

    items = extract_transactions(messages)
"""

__version__ = "0.1.0"
__author__ = "mailtxn contributors"

from .core.config import Environment, get_config
from .core.models import RawMessage, TransactionRecord, TransactionType, UnparsedRecord
from .extraction import (
    TransactionPipeline,
    extract_generic,
    extract_transactions,
    should_filter_out,
)

__all__ = [
    # Models
    "RawMessage",
    "TransactionRecord",
    "TransactionType",
    "UnparsedRecord",
    # Extraction
    "TransactionPipeline",
    "extract_generic",
    "extract_transactions",
    "should_filter_out",
    # Configuration
    "Environment",
    "get_config",
]
