#!/usr/bin/env python3
"""
Noise Filter Module

Drops messages that can never describe a transaction (one-time passwords,
verification codes, marketing greetings) before any extraction is tried.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from ..core.models import coerce_message

logger = logging.getLogger(__name__)

# Matched against the lower-cased snippet
NOISE_SIGNATURES: tuple[re.Pattern, ...] = (
    re.compile(r"^otp is "),
    re.compile(r"dear customer, greetings from hdfc bank!"),
    re.compile(r"one time password"),
    re.compile(r"verification code"),
    re.compile(r"security code"),
)


class NoiseFilter:
    """
    Decides whether a message is noise and should be dropped.

    A message with no snippet (or no message at all) is always dropped, so
    the orchestrator and direct callers of the generic extractor agree on
    what "nothing to extract" means.
    """

    def __init__(self, signatures: Iterable[re.Pattern | str] = NOISE_SIGNATURES):
        self.signatures = tuple(re.compile(s) if isinstance(s, str) else s for s in signatures)

    def extend(self, *signatures: re.Pattern | str) -> "NoiseFilter":
        """Return a new filter with extra signatures appended."""
        return NoiseFilter(self.signatures + tuple(signatures))

    def should_filter_out(self, message: Any) -> bool:
        """
        Check whether ``message`` should be dropped.

        Args:
            message: RawMessage, provider dict, or None

        Returns:
            True if the message is absent, has no snippet, or matches a noise signature
        """
        raw = coerce_message(message)
        if raw is None or not raw.snippet:
            return True

        snippet = raw.snippet.lower()
        for signature in self.signatures:
            if signature.search(snippet):
                logger.debug(f"Filtered message {raw.id}: matched {signature.pattern!r}")
                return True

        return False


DEFAULT_FILTER = NoiseFilter()


def should_filter_out(message: Any) -> bool:
    """Check ``message`` against the default noise signatures."""
    return DEFAULT_FILTER.should_filter_out(message)
