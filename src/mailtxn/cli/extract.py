#!/usr/bin/env python3
"""
Extract CLI - Transaction Extraction Commands

Runs the extraction pipeline over saved Gmail messages and renders the
result as a table or JSON.
"""

from pathlib import Path
from typing import Any

import click

from ..core.json_utils import format_json, load_message_dump, write_json
from ..core.models import ExtractedItem, TransactionRecord
from ..extraction import TransactionPipeline
from ..extraction.pipeline import ExtractionSummary

PLACEHOLDER = "-"
RAW_MESSAGE_LABEL = "Raw Message"
SNIPPET_PREVIEW_CHARS = 50

TABLE_COLUMNS = ["ID", "Date", "Amount", "Type", "Account", "Merchant/Recipient", "VPA ID"]


def item_to_row(item: ExtractedItem) -> list[str]:
    """Flatten one extracted item into table cells, with placeholders for absent fields."""
    if isinstance(item, TransactionRecord):
        return [
            item.id,
            item.date or PLACEHOLDER,
            item.amount or PLACEHOLDER,
            item.type.value,
            item.account_number or PLACEHOLDER,
            item.merchant or PLACEHOLDER,
            item.vpa_id or PLACEHOLDER,
        ]

    preview = f"{item.snippet[:SNIPPET_PREVIEW_CHARS]}..." if item.snippet else PLACEHOLDER
    return [item.id, item.date, PLACEHOLDER, RAW_MESSAGE_LABEL, PLACEHOLDER, preview, PLACEHOLDER]


def format_table(items: list[ExtractedItem]) -> str:
    """Render extracted items as a fixed-width text table."""
    rows = [TABLE_COLUMNS] + [item_to_row(item) for item in items]
    widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_COLUMNS))]

    lines = []
    for index, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if index == 0:
            lines.append("  ".join("-" * width for width in widths))
    return "\n".join(lines)


def items_to_json(items: list[ExtractedItem], summary: ExtractionSummary) -> dict[str, Any]:
    return {
        "summary": {
            "total": summary.total,
            "filtered": summary.filtered,
            "parsed": summary.parsed,
            "unparsed": summary.unparsed,
            "by_matcher": summary.by_matcher,
        },
        "items": [item.to_dict() for item in items],
    }


def emit_results(messages: list[Any], output_format: str, output: str | None, verbose: bool) -> None:
    """Run the pipeline over ``messages`` and print (and optionally save) the results."""
    items, summary = TransactionPipeline().run_with_summary(messages)
    result = items_to_json(items, summary)

    if output_format == "json":
        click.echo(format_json(result))
    elif items:
        click.echo(format_table(items))
    else:
        click.echo("No messages found")

    if verbose:
        click.echo()
        click.echo(
            f"Messages: {summary.total}  Parsed: {summary.parsed}  "
            f"Unparsed: {summary.unparsed}  Filtered: {summary.filtered}"
        )

    if output:
        write_json(Path(output), result)
        click.echo(f"Results saved to: {output}")


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
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
def extract(ctx: click.Context, input_file: str, output_format: str, output: str | None, verbose: bool) -> None:
    """
    Extract transactions from a JSON dump of Gmail messages.

    INPUT_FILE holds a list of messages, or an object with a "messages" list.

    Examples:
      mailtxn extract messages.json
      mailtxn extract messages.json --format json --output results.json
    """
    try:
        messages = load_message_dump(input_file)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    emit_results(messages, output_format, output, verbose or ctx.obj.get("verbose", False))
