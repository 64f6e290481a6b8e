# src/fo_app/cli.py
from __future__ import annotations

import typer

from fo_app.commands.organize import register as register_organize
from fo_app.core.config import get_settings
from fo_app.core.logging import configure_logging
from fo_app.version import get_version

app = typer.Typer(help="Folder Organizer CLI")

register_organize(app)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    level = "DEBUG" if verbose else get_settings().LOG_LEVEL
    configure_logging(level, rich=True)


@app.command("version")
def version_cmd():
    typer.echo(get_version())


if __name__ == "__main__":
    app()
