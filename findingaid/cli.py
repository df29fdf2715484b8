"""Command-line interface for the finding-aid splitter."""

import logging
from dataclasses import replace
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from findingaid import __version__
from findingaid.config import SplitterOptions, load_options, parse_field_names
from findingaid.logging_config import setup_logging
from findingaid.parsers.splitting import EadSplitter

app = typer.Typer(
    name="findingaid",
    help="Split EAD finding aids into standalone unit records.",
)
console = Console()


@app.command()
def split(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="EAD XML file to split",
    ),
    options_file: Path | None = typer.Option(
        None,
        "--options",
        "-o",
        exists=True,
        dir_okay=False,
        help="YAML file with splitter options",
    ),
    no_prepend_unit_id: bool = typer.Option(
        False,
        "--no-prepend-unit-id",
        help="Do not prefix parent titles with the parent's unit id",
    ),
    non_inherited: str | None = typer.Option(
        None,
        "--non-inherited",
        help="Comma-separated did fields not inherited by child units",
    ),
    count: bool = typer.Option(
        False,
        "--count",
        "-c",
        help="Only print the archive summary and number of units",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every emitted unit",
    ),
) -> None:
    """Split an EAD file and print one XML record per unit."""
    if verbose:
        setup_logging(logging.DEBUG)

    try:
        options = load_options(options_file) if options_file else SplitterOptions()
        if no_prepend_unit_id:
            options = replace(options, prepend_parent_title_with_unit_id=False)
        if non_inherited:
            options = replace(
                options, non_inherited_fields=parse_field_names(non_inherited)
            )

        splitter = EadSplitter.from_file(path, options)

        if count:
            archive = splitter.archive
            console.print(f"[bold]{escape(archive.id)}[/bold] {escape(archive.title)}")
            if archive.agency_code:
                console.print(f"  Agency: {escape(archive.agency_code)}")
            console.print(f"  Units: [green]{splitter.total}[/green]")
            return

        for record in splitter:
            # Plain print keeps the XML free of console markup
            typer.echo(record)
            typer.echo()

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"findingaid {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
