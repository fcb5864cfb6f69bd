#!/usr/bin/env python3
"""
Configuration Management for mailtxn

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production); tokens and
client secrets are read from the environment (or a .env file) only.
"""

import logging
import os
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_ALERT_SENDER = "alerts@hdfcbank.net"
DEFAULT_ALERT_SUBJECTS = [
    "You have done a UPI txn. Check details",
    "View: Account update for your HDFC Bank A/c",
]


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class GmailConfig:
    """Gmail API access settings."""

    api_base: str = "https://gmail.googleapis.com/gmail/v1"
    access_token: str | None = None
    refresh_token: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    token_url: str = "https://oauth2.googleapis.com/token"
    timeout: int = 30


@dataclass
class QueryConfig:
    """Default mailbox search used by the fetch and query commands."""

    sender: str | None = DEFAULT_ALERT_SENDER
    subjects: list = field(default_factory=lambda: list(DEFAULT_ALERT_SUBJECTS))
    after: str | None = None
    before: str | None = None
    max_results: int = 10


@dataclass
class Config:
    """
    Main configuration class for mailtxn.

    Loads configuration from environment variables with secure defaults
    and validation for each environment type.
    """

    environment: Environment

    data_dir: Path
    output_dir: Path

    gmail: GmailConfig
    query: QueryConfig

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("MAILTXN_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_mailtxn"
            data_dir = Path(os.getenv("MAILTXN_DATA_DIR", str(default_test_dir))).expanduser().resolve()
        else:
            data_dir = Path(os.getenv("MAILTXN_DATA_DIR", "./data")).expanduser().resolve()

        gmail = GmailConfig(
            access_token=os.getenv("GMAIL_ACCESS_TOKEN"),
            refresh_token=os.getenv("GMAIL_REFRESH_TOKEN"),
            client_id=os.getenv("GOOGLE_CLIENT_ID"),
            client_secret=os.getenv("GOOGLE_CLIENT_SECRET"),
            timeout=int(os.getenv("GMAIL_TIMEOUT", "30")),
        )

        subjects_env = os.getenv("MAILTXN_QUERY_SUBJECTS")
        query = QueryConfig(
            sender=os.getenv("MAILTXN_QUERY_FROM", DEFAULT_ALERT_SENDER) or None,
            subjects=_parse_list(subjects_env) if subjects_env is not None else list(DEFAULT_ALERT_SUBJECTS),
            after=os.getenv("MAILTXN_QUERY_AFTER") or None,
            before=os.getenv("MAILTXN_QUERY_BEFORE") or None,
            max_results=int(os.getenv("MAILTXN_QUERY_MAX_RESULTS", "10")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=data_dir / "transactions",
            gmail=gmail,
            query=query,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.environment == Environment.PRODUCTION and not self.gmail.access_token:
            errors.append("GMAIL_ACCESS_TOKEN is required in production")

        if self.gmail.refresh_token and not (self.gmail.client_id and self.gmail.client_secret):
            errors.append("GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET are required when GMAIL_REFRESH_TOKEN is set")

        if self.gmail.timeout <= 0:
            errors.append("Gmail timeout must be positive")
        if self.query.max_results <= 0:
            errors.append("Query max results must be positive")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from external libraries in production
        if self.environment == Environment.PRODUCTION:
            logging.getLogger("urllib3").setLevel(logging.WARNING)
            logging.getLogger("requests").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return [
            "gmail.access_token",
            "gmail.refresh_token",
            "gmail.client_secret",
        ]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if (
                        not include_sensitive
                        and full_field_name in self.get_sensitive_fields()
                        and nested_value is not None
                    ):
                        nested_dict[nested_name] = "***REDACTED***"
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


def _parse_list(value: str, delimiter: str = ",") -> list:
    """Parse comma-separated string into list, handling empty values."""
    if not value:
        return []
    return [item.strip() for item in value.split(delimiter) if item.strip()]


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_output_dir() -> Path:
    """Get the output directory path."""
    return get_config().output_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
