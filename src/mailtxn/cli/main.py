#!/usr/bin/env python3
"""
Main CLI Entry Point for mailtxn

Provides the command-line interface for extracting transactions from
bank-alert emails.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    mailtxn - Bank Alert Transaction Extraction

    Extracts UPI and card transactions from bank alert emails.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["MAILTXN_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("mailtxn").setLevel(logging.DEBUG)

    try:
        ctx.obj["config"] = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from mailtxn import __author__, __version__

    click.echo(f"mailtxn v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    values = config_obj.to_dict()

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Gmail API: {config_obj.gmail.api_base}")
    click.echo(f"  Access Token: {values['gmail']['access_token'] or 'not set'}")
    click.echo(f"  Refresh Token: {values['gmail']['refresh_token'] or 'not set'}")
    click.echo(f"  Query Sender: {config_obj.query.sender or '-'}")
    click.echo(f"  Query Subjects: {', '.join(config_obj.query.subjects) or '-'}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .extract import extract  # noqa: E402
from .gmail import fetch, query  # noqa: E402

main.add_command(extract)
main.add_command(query)
main.add_command(fetch)


if __name__ == "__main__":
    main()
