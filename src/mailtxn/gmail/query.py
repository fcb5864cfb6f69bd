#!/usr/bin/env python3
"""
Gmail Search Query Builder

Builds the query string for the Gmail ``users.messages.list`` endpoint.
Search terms are joined with literal ``+`` characters so the result can be
appended to the list URL as-is.
"""

from urllib.parse import quote

# Characters JavaScript's encodeURIComponent leaves untouched (besides alphanumerics and "_.-~")
_URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode ``value`` the way encodeURIComponent does."""
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def build_gmail_query(
    sender: str | None = None,
    subject: str | list[str] | None = None,
    after: str | None = None,
    before: str | None = None,
    max_results: int | str | None = None,
) -> str:
    """
    Build a Gmail list query.

    Args:
        sender: Sender address for ``from:``
        subject: A single subject, or a list of subjects OR-combined
        after: Lower date bound, e.g. ``2025/07/01``
        before: Upper date bound
        max_results: Page size for the list call

    Returns:
        Query string such as ``q=from:a@b.com+after:2025/07/01&maxResults=10``,
        or an empty string if no parameter is given
    """
    terms = []

    if sender:
        terms.append(f"from:{encode_component(sender).replace('%40', '@')}")

    if subject:
        if isinstance(subject, (list, tuple)):
            quoted = [encode_component(f'"{s}"') for s in subject]
            terms.append("(" + " OR ".join(f"subject:{q}" for q in quoted) + ")")
        else:
            terms.append(f"subject:{encode_component(subject)}")

    if after:
        terms.append(f"after:{encode_component(after).replace('%2F', '/')}")
    if before:
        terms.append(f"before:{encode_component(before).replace('%2F', '/')}")

    query = f"q={'+'.join(terms)}" if terms else ""

    if max_results:
        query += f"&maxResults={max_results}" if query else f"maxResults={max_results}"

    return query
