#!/usr/bin/env python3
"""
Gmail API Client Module

Thin message source for the extraction pipeline: lists the messages that
match a query and fetches each one in full. Session handling stays with the
caller, which injects:

- ``refresh_access_token(refresh_token) -> str`` to obtain a new access token
- ``on_token_refreshed(token)`` to persist it
- ``on_auth_failure()`` to react when authentication cannot be recovered
"""

import logging
from collections.abc import Callable
from typing import Any

import requests

logger = logging.getLogger(__name__)

GMAIL_API_BASE = "https://gmail.googleapis.com/gmail/v1"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"


class GmailError(Exception):
    """Base class for Gmail client errors."""


class GmailAuthError(GmailError):
    """Authentication failed and could not be recovered by a token refresh."""


class GmailApiError(GmailError):
    """The Gmail API returned a non-success response."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


def _error_message(response: requests.Response) -> str:
    """Pull the provider's error message out of a failed response."""
    try:
        data = response.json()
    except ValueError:
        return f"API error: {response.status_code}"

    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict):
        error = error.get("message")
    return error or f"API error: {response.status_code}"


class GoogleTokenRefresher:
    """Exchanges a refresh token for a new access token at Google's token endpoint."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        token_url: str = GOOGLE_TOKEN_URL,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_url = token_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def __call__(self, refresh_token: str) -> str:
        if not refresh_token:
            raise GmailAuthError("Refresh token is required")

        try:
            response = self.session.post(
                self.token_url,
                data={
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "grant_type": "refresh_token",
                    "refresh_token": refresh_token,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise GmailAuthError(f"Failed to refresh token: {e}") from e

        if not response.ok:
            logger.error(f"Token refresh failed with status {response.status_code}")
            raise GmailAuthError(f"Failed to refresh token: {_error_message(response)}")

        try:
            data = response.json()
        except ValueError as e:
            raise GmailAuthError(f"Failed to refresh token: invalid response body ({e})") from e

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            raise GmailAuthError("Token response did not include an access token")

        return access_token


class GmailClient:
    """
    Fetches messages from the Gmail REST API.

    A 401 response triggers at most one token refresh followed by one retry.
    There is no backoff and no pagination: ``maxResults`` in the query bounds
    what a single list call returns.
    """

    def __init__(
        self,
        access_token: str,
        refresh_token: str | None = None,
        refresh_access_token: Callable[[str], str] | None = None,
        on_token_refreshed: Callable[[str], None] | None = None,
        on_auth_failure: Callable[[], None] | None = None,
        base_url: str = GMAIL_API_BASE,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.refresh_access_token = refresh_access_token
        self.on_token_refreshed = on_token_refreshed
        self.on_auth_failure = on_auth_failure
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _send(self, url: str, token: str) -> requests.Response:
        try:
            return self.session.get(url, headers={"Authorization": f"Bearer {token}"}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise GmailError(f"Request failed: {e}") from e

    def _fail_auth(self, message: str) -> GmailAuthError:
        logger.error(message)
        if self.on_auth_failure is not None:
            self.on_auth_failure()
        return GmailAuthError(message)

    def _refresh(self) -> str:
        if not self.refresh_token or self.refresh_access_token is None:
            raise self._fail_auth("Authentication token expired. Please sign in again.")

        logger.info("Token expired, attempting to refresh...")
        try:
            new_token = self.refresh_access_token(self.refresh_token)
        except GmailError as e:
            raise self._fail_auth(f"Failed to refresh token: {e}") from e

        self.access_token = new_token
        if self.on_token_refreshed is not None:
            self.on_token_refreshed(new_token)
        return new_token

    def _get_json(self, url: str) -> dict[str, Any]:
        """GET ``url``, refreshing the token once on 401."""
        logger.debug(f"GET {url}")
        response = self._send(url, self.access_token)

        if response.status_code == 401:
            response = self._send(url, self._refresh())
            if response.status_code == 401:
                raise self._fail_auth(f"Authentication failed after token refresh: {_error_message(response)}")

        if not response.ok:
            raise GmailApiError(response.status_code, _error_message(response))

        try:
            return response.json()
        except ValueError as e:
            raise GmailApiError(response.status_code, f"Invalid JSON response: {e}") from e

    def list_message_ids(self, query: str = "") -> list[str]:
        """List ids of the messages matching ``query`` (a build_gmail_query string)."""
        url = f"{self.base_url}/users/me/messages"
        if query:
            url = f"{url}?{query}"

        data = self._get_json(url)
        return [message["id"] for message in data.get("messages", [])]

    def get_message(self, message_id: str) -> dict[str, Any]:
        """Fetch one message in full format."""
        return self._get_json(f"{self.base_url}/users/me/messages/{message_id}?format=full")

    def fetch_messages(self, query: str = "") -> list[dict[str, Any]]:
        """List and fetch every message matching ``query``, in listing order."""
        message_ids = self.list_message_ids(query)
        logger.info(f"Fetching {len(message_ids)} messages")
        return [self.get_message(message_id) for message_id in message_ids]
