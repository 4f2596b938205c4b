"""CLI command that scans a document and lists its glossary.

Implements 'clausegloss build': direct definitions and cross-references
found in the document, as text or JSON.
"""

import json
import sys

import click

from clausegloss.cli.commands.common import common_options, load_runtime_config
from clausegloss.glossary.session import GlossarySession
from clausegloss.host.adapters import RecordingSink, StaticSelection, TextDocument
from clausegloss.lib.logging_config import get_logger

logger = get_logger(__name__)


@click.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output the glossary as JSON")
@common_options
def build(
    document: str,
    as_json: bool,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Build the glossary of DOCUMENT and list its terms.

    DOCUMENT is a UTF-8 text file with one paragraph per line.

    \b
    EXAMPLES:

        clausegloss build agreement.txt

        clausegloss build agreement.txt --json
    """
    config = load_runtime_config(config_path, verbose, quiet)
    logger.info(f"Build command invoked: document={document}")

    sink = RecordingSink()
    session = GlossarySession(TextDocument(document), StaticSelection(), sink, config)
    if not session.rebuild():
        click.secho(f"Error: {sink.last_status}", fg="red", err=True)
        sys.exit(1)

    glossary = session.glossary
    if glossary is None:
        click.secho("Error: Glossary was not built", fg="red", err=True)
        sys.exit(1)

    if as_json:
        payload = {
            "direct": dict(glossary.direct),
            "xref": {
                key: ref.model_dump() for key, ref in sorted(glossary.xref.items())
            },
        }
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    click.secho(
        f"{len(glossary.direct)} direct definitions, "
        f"{len(glossary.xref)} cross-references",
        bold=True,
    )
    for key in sorted(glossary.direct):
        click.echo(f"  {key}: {glossary.direct[key]}")
    for key in sorted(glossary.xref):
        click.echo(f"  {key} -> clause {glossary.xref[key].clause_ref}")
