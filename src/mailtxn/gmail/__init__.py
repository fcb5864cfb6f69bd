"""
Gmail Integration Package

Message source for the extraction pipeline.

Key Components:
- query: search query construction for the messages.list endpoint
- client: message fetching with injected token-refresh and auth-failure callbacks
"""

from .client import (
    GmailApiError,
    GmailAuthError,
    GmailClient,
    GmailError,
    GoogleTokenRefresher,
)
from .query import build_gmail_query, encode_component

__all__ = [
    "GmailApiError",
    "GmailAuthError",
    "GmailClient",
    "GmailError",
    "GoogleTokenRefresher",
    "build_gmail_query",
    "encode_component",
]
