"""CLI command that answers selection events read from stdin.

Each input line is treated as a selection-changed event carrying the newly
selected text. ``:rebuild`` rescans the document and ``:quit`` exits.
"""

import click

from clausegloss.cli.commands.common import common_options, load_runtime_config
from clausegloss.glossary.session import GlossarySession
from clausegloss.host.adapters import (
    ConsoleSink,
    SelectionEventHub,
    StaticSelection,
    TextDocument,
)
from clausegloss.lib.logging_config import get_logger

logger = get_logger(__name__)

REBUILD_COMMAND = ":rebuild"
QUIT_COMMAND = ":quit"


@click.command()
@click.argument("document", type=click.Path(dir_okay=False))
@common_options
def watch(
    document: str,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Resolve selections typed on stdin against DOCUMENT.

    \b
    Commands:
        :rebuild    Rescan the document
        :quit       Exit
    """
    config = load_runtime_config(config_path, verbose, quiet)
    logger.info(f"Watch command invoked: document={document}")

    hub = SelectionEventHub()
    session = GlossarySession(
        TextDocument(document), StaticSelection(), ConsoleSink(), config
    )
    session.connect(hub)
    session.rebuild()

    stdin = click.get_text_stream("stdin")
    for line in stdin:
        command = line.strip()
        if command == QUIT_COMMAND:
            break
        if command == REBUILD_COMMAND:
            session.rebuild()
            continue
        hub.publish(line)

    logger.info("Watch session ended")
