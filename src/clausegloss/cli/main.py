"""Entry point for the clausegloss command."""

import click

from clausegloss import __version__
from clausegloss.cli.commands.build import build
from clausegloss.cli.commands.lookup import lookup
from clausegloss.cli.commands.watch import watch


@click.group()
@click.version_option(__version__, prog_name="clausegloss")
def main() -> None:
    """ClauseGloss - resolve defined terms in legal documents."""
    pass


main.add_command(build)
main.add_command(lookup)
main.add_command(watch)


if __name__ == "__main__":
    main()
