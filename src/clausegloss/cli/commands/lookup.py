"""CLI command that resolves terms against a document's glossary."""

import json
import sys

import click

from clausegloss.cli.commands.common import common_options, load_runtime_config
from clausegloss.glossary.session import GlossarySession
from clausegloss.host.adapters import (
    ConsoleSink,
    RecordingSink,
    StaticSelection,
    TextDocument,
)
from clausegloss.host.protocols import ResultSink
from clausegloss.lib.logging_config import get_logger

logger = get_logger(__name__)


@click.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.argument("terms", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@common_options
def lookup(
    document: str,
    terms: tuple[str, ...],
    as_json: bool,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Look up the definition of each TERM in DOCUMENT.

    \b
    EXAMPLES:

        clausegloss lookup agreement.txt "Business Day"

        clausegloss lookup agreement.txt "Clawback Amounts" Expenses --json
    """
    config = load_runtime_config(config_path, verbose, quiet)
    logger.info(f"Lookup command invoked: document={document}, terms={len(terms)}")

    sink: ResultSink = RecordingSink() if as_json else ConsoleSink()
    selection = StaticSelection()
    session = GlossarySession(TextDocument(document), selection, sink, config)

    if not session.rebuild():
        if isinstance(sink, RecordingSink):
            click.secho(f"Error: {sink.last_status}", fg="red", err=True)
        sys.exit(1)

    results = []
    for term in terms:
        selection.select(term)
        results.append(session.lookup())

    if as_json:
        click.echo(
            json.dumps([r.model_dump(mode="json") for r in results], indent=2)
        )
