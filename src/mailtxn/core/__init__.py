"""
Core Utilities Package

Shared data models, configuration and helpers used by the extraction
pipeline, the Gmail client and the CLI.

This package provides:
- Message and record models (RawMessage, TransactionRecord, UnparsedRecord)
- Configuration management for environment-specific settings
- internalDate conversion for unparsed records
- JSON reading and writing helpers
"""

from .config import (
    Config,
    Environment,
    GmailConfig,
    QueryConfig,
    get_config,
    get_output_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .dates import UNKNOWN_DATE, format_internal_date, parse_internal_date
from .models import (
    ExtractedItem,
    RawMessage,
    TransactionRecord,
    TransactionType,
    UnparsedRecord,
    coerce_message,
)

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "GmailConfig",
    "QueryConfig",
    "get_config",
    "get_output_dir",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
    # Dates
    "UNKNOWN_DATE",
    "format_internal_date",
    "parse_internal_date",
    # Models
    "ExtractedItem",
    "RawMessage",
    "TransactionRecord",
    "TransactionType",
    "UnparsedRecord",
    "coerce_message",
]
