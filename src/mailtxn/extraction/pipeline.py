#!/usr/bin/env python3
"""
Transaction Extraction Pipeline

Orchestrates the extraction passes for a batch of messages:

1. Noise filter: drop OTPs, verification codes and other noise
2. Specific matchers: first matching alert template wins
3. Generic extractor: field-by-field fallback with the HDFC refine step
4. Unparsed fallback: any remaining message becomes an UnparsedRecord

Output order follows input order. Filtered messages are simply absent and
every other message yields exactly one item.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core.models import ExtractedItem, RawMessage, UnparsedRecord, coerce_message
from .generic import GenericExtractor
from .matchers import SPECIFIC_MATCHERS, TransactionMatcher
from .noise_filter import DEFAULT_FILTER, NoiseFilter

logger = logging.getLogger(__name__)


@dataclass
class ExtractionSummary:
    """Counts describing one pipeline run."""

    total: int = 0
    filtered: int = 0
    specific: int = 0
    generic: int = 0
    unparsed: int = 0
    by_matcher: dict[str, int] = field(default_factory=dict)

    @property
    def parsed(self) -> int:
        return self.specific + self.generic


class TransactionPipeline:
    """
    Stateless extraction pipeline.

    The filter, the ordered matchers and the generic extractor are fixed at
    construction; ``run`` can be called any number of times and always gives
    the same output for the same input.
    """

    def __init__(
        self,
        noise_filter: NoiseFilter = DEFAULT_FILTER,
        matchers: Sequence[TransactionMatcher] = SPECIFIC_MATCHERS,
        generic: GenericExtractor | None = None,
    ):
        self.noise_filter = noise_filter
        self.matchers = tuple(matchers)
        self.generic = generic if generic is not None else GenericExtractor(noise_filter)

    def extract_one(self, message: RawMessage) -> tuple[ExtractedItem, str]:
        """
        Extract a single, already-filtered message.

        Returns:
            (item, stage) where stage names the matcher that fired,
            ``"generic"`` or ``"unparsed"``
        """
        snippet = message.snippet or ""

        for matcher in self.matchers:
            record = matcher.attempt(message.id, snippet)
            if record is not None:
                return record, matcher.name

        record = self.generic.attempt(message)
        if record is not None:
            return record, "generic"

        return UnparsedRecord.from_message(message), "unparsed"

    def run_with_summary(self, messages: Any) -> tuple[list[ExtractedItem], ExtractionSummary]:
        """Run the pipeline and also return per-stage counts."""
        summary = ExtractionSummary()

        if messages is None or not isinstance(messages, (list, tuple)):
            logger.warning(f"Expected a list of messages, got {type(messages).__name__}")
            return [], summary

        items: list[ExtractedItem] = []
        for value in messages:
            summary.total += 1

            if self.noise_filter.should_filter_out(value):
                summary.filtered += 1
                continue

            message = coerce_message(value)
            item, stage = self.extract_one(message)
            items.append(item)

            logger.debug(f"Message {message.id}: {stage}")
            if stage == "unparsed":
                summary.unparsed += 1
            elif stage == "generic":
                summary.generic += 1
            else:
                summary.specific += 1
                summary.by_matcher[stage] = summary.by_matcher.get(stage, 0) + 1

        logger.info(
            f"Extracted {summary.parsed} transactions from {summary.total} messages "
            f"({summary.filtered} filtered, {summary.unparsed} unparsed)"
        )

        return items, summary

    def run(self, messages: Any) -> list[ExtractedItem]:
        items, _ = self.run_with_summary(messages)
        return items


DEFAULT_PIPELINE = TransactionPipeline()


def extract_transactions(messages: Any) -> list[ExtractedItem]:
    """
    Extract transactions from a list of messages with the default pipeline.

    Args:
        messages: List or tuple of RawMessage objects or provider message dicts

    Returns:
        TransactionRecord or UnparsedRecord per non-filtered message, in input order;
        an empty list if ``messages`` is not a list or tuple
    """
    return DEFAULT_PIPELINE.run(messages)

