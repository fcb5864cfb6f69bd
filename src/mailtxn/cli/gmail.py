#!/usr/bin/env python3
"""
Gmail CLI - Query and Fetch Commands

Builds Gmail search queries and fetches alert emails straight into the
extraction pipeline.
"""

import logging

import click

from ..core.config import Config, QueryConfig
from ..gmail import GmailClient, GmailError, GoogleTokenRefresher, build_gmail_query
from .extract import emit_results

logger = logging.getLogger(__name__)


def query_from_config(query_config: QueryConfig) -> str:
    return build_gmail_query(
        sender=query_config.sender,
        subject=query_config.subjects,
        after=query_config.after,
        before=query_config.before,
        max_results=query_config.max_results,
    )


def client_from_config(config: Config) -> GmailClient:
    """Create a GmailClient wired to the configured tokens."""
    gmail = config.gmail
    if not gmail.access_token:
        raise click.ClickException("GMAIL_ACCESS_TOKEN is not set")

    refresher = None
    if gmail.refresh_token and gmail.client_id and gmail.client_secret:
        refresher = GoogleTokenRefresher(
            client_id=gmail.client_id,
            client_secret=gmail.client_secret,
            token_url=gmail.token_url,
            timeout=gmail.timeout,
        )

    def on_token_refreshed(token: str) -> None:
        gmail.access_token = token
        logger.info("Access token refreshed for this session")

    def on_auth_failure() -> None:
        click.echo("Gmail authentication failed. Update GMAIL_ACCESS_TOKEN and sign in again.", err=True)

    return GmailClient(
        access_token=gmail.access_token,
        refresh_token=gmail.refresh_token,
        refresh_access_token=refresher,
        on_token_refreshed=on_token_refreshed,
        on_auth_failure=on_auth_failure,
        base_url=gmail.api_base,
        timeout=gmail.timeout,
    )


@click.command()
@click.option("--from", "sender", help="Sender address")
@click.option("--subject", "subjects", multiple=True, help="Subject to match (repeat to OR-combine)")
@click.option("--after", help="Only messages after this date (YYYY/MM/DD)")
@click.option("--before", help="Only messages before this date (YYYY/MM/DD)")
@click.option("--max-results", type=int, help="Maximum number of messages")
@click.pass_context
def query(
    ctx: click.Context,
    sender: str | None,
    subjects: tuple,
    after: str | None,
    before: str | None,
    max_results: int | None,
) -> None:
    """
    Print the Gmail search query for the given filters.

    Options that are not given fall back to the configured defaults.

    Examples:
      mailtxn query
      mailtxn query --from alerts@hdfcbank.net --after 2025/07/01 --max-results 25
    """
    defaults: QueryConfig = ctx.obj["config"].query

    click.echo(
        build_gmail_query(
            sender=sender or defaults.sender,
            subject=list(subjects) if subjects else defaults.subjects,
            after=after or defaults.after,
            before=before or defaults.before,
            max_results=max_results or defaults.max_results,
        )
    )


@click.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output format",
)
@click.option("--output", help="Also write JSON results to this file")
@click.option("--verbose", "-v", is_flag=True, help="Show extraction summary")
@click.pass_context
def fetch(ctx: click.Context, output_format: str, output: str | None, verbose: bool) -> None:
    """
    Fetch alert emails from Gmail and extract transactions.

    Uses the configured query (see `mailtxn query`) and access token.
    """
    config: Config = ctx.obj["config"]
    verbose = verbose or ctx.obj.get("verbose", False)

    search = query_from_config(config.query)
    if verbose:
        click.echo(f"Query: {search}")

    client = client_from_config(config)
    try:
        messages = client.fetch_messages(search)
    except GmailError as e:
        raise click.ClickException(str(e)) from e

    emit_results(messages, output_format, output, verbose)
