"""Main CLI application wiring for vatview.

  vatview tui                  browse pilots and controllers
  vatview tui --file data.json browse a saved V3 document
  vatview status               print a one-shot summary
"""

from pathlib import Path
from typing import Optional

import typer

from vatview.cli.common import load_startup

app = typer.Typer(add_completion=False, help="vatview — who is online on VATSIM")


@app.callback()
def main():
    """vatview CLI."""
    pass


# =============================================================================
# Top-level commands
# =============================================================================

from vatview.cli import status as status_cmd

status_cmd.register(app)


@app.command()
def tui(
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read a saved V3 JSON document instead of fetching"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a YAML config file"
    ),
):
    """Launch the vatview TUI."""
    from vatview.tui.app import VatviewApp

    settings, snapshot = load_startup(file, config)
    VatviewApp(snapshot, settings).run()
