from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from vatview.cli.common import load_startup


def register(app: typer.Typer) -> None:
    @app.command()
    def status(
        file: Optional[Path] = typer.Option(
            None, "--file", "-f", help="Read a saved V3 JSON document instead of fetching"
        ),
        config: Optional[Path] = typer.Option(
            None, "--config", "-c", help="Path to a YAML config file"
        ),
    ) -> None:
        """Print a summary of who is online."""
        _, snapshot = load_startup(file, config)
        general = snapshot.general

        print("VATSIM network\n")
        print(f"  Updated:           {general.update_timestamp or '?'}")
        print(f"  Connected clients: {general.connected_clients}")
        print(f"  Unique users:      {general.unique_users}")
        print("\nOnline:")
        print(f"  • Pilots:      {len(snapshot.pilots)}")
        print(f"  • Controllers: {len(snapshot.controllers)}")
