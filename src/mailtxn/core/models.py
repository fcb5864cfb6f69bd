#!/usr/bin/env python3
"""
Core Data Models for mailtxn

Message and record types shared by the extraction pipeline, the Gmail client
and the CLI. All models are immutable and built fresh for every pipeline run.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .dates import UNKNOWN_DATE, format_internal_date


class TransactionType(Enum):
    """Labels assigned to extracted transactions."""

    UPI_DEBIT = "UPI Debit"
    UPI_CREDIT = "UPI Credit"
    CARD_DEBIT = "Card Debit"
    DEBIT = "Debit"
    CREDIT = "Credit"
    UNKNOWN = "Unknown Transaction"


@dataclass(frozen=True)
class RawMessage:
    """
    A mail message as returned by the provider's message API.

    Only ``id``, ``snippet`` and ``internalDate`` are read by the pipeline;
    the full provider payload is kept so unparsed records can carry it.
    """

    id: str
    snippet: str | None = None
    internal_date: str | None = None
    payload: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawMessage":
        """Create RawMessage from a provider message dict (camelCase keys)."""
        internal_date = data.get("internalDate")
        snippet = data.get("snippet")
        return cls(
            id=str(data.get("id") or ""),
            snippet=snippet if isinstance(snippet, str) else None,
            internal_date=str(internal_date) if internal_date is not None else None,
            payload=dict(data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the original provider payload, or the minimal fields if there is none."""
        if self.payload:
            return dict(self.payload)
        result: dict[str, Any] = {"id": self.id, "snippet": self.snippet}
        if self.internal_date is not None:
            result["internalDate"] = self.internal_date
        return result


@dataclass(frozen=True)
class TransactionRecord:
    """A transaction extracted from a message snippet."""

    id: str
    type: TransactionType = TransactionType.UNKNOWN
    amount: str | None = None
    account_number: str | None = None
    date: str | None = None
    reference: str | None = None
    merchant: str | None = None
    vpa_id: str | None = None

    @property
    def is_confident(self) -> bool:
        """True when the record carries an amount plus a date or a reference."""
        return bool(self.amount) and bool(self.date or self.reference)

    def with_fields(self, **changes: Any) -> "TransactionRecord":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "type": self.type.value,
            "amount": self.amount,
            "accountNumber": self.account_number,
            "date": self.date,
            "reference": self.reference,
            "merchant": self.merchant,
            "vpaId": self.vpa_id,
        }


@dataclass(frozen=True)
class UnparsedRecord:
    """
    Placeholder for a message that no extractor could parse.

    The verbatim snippet and the original message are kept so the message
    can still be shown and inspected by hand.
    """

    id: str
    snippet: str | None
    date: str
    raw: RawMessage

    @classmethod
    def from_message(cls, message: RawMessage) -> "UnparsedRecord":
        """Build the fallback record for ``message``."""
        return cls(
            id=message.id,
            snippet=message.snippet,
            date=format_internal_date(message.internal_date),
            raw=message,
        )

    @property
    def has_known_date(self) -> bool:
        return self.date != UNKNOWN_DATE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "snippet": self.snippet,
            "date": self.date,
            "raw": self.raw.to_dict(),
        }


ExtractedItem = TransactionRecord | UnparsedRecord


def coerce_message(value: Any) -> RawMessage | None:
    """
    Accept a RawMessage or a provider dict; anything else counts as no message.

    A message without an id is treated as absent.
    """
    if isinstance(value, RawMessage):
        return value if value.id else None
    if isinstance(value, Mapping):
        if value.get("id") in (None, ""):
            return None
        return RawMessage.from_dict(value)
    return None
