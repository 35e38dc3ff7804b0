from __future__ import annotations

from pathlib import Path
import logging

import typer

from vatview.api import fetch_snapshot
from vatview.config import Settings, load_settings, setup_logging
from vatview.models import Snapshot


def load_startup(file: Path | None, config: Path | None) -> tuple[Settings, Snapshot]:
    """Settings, logging and the snapshot; any failure ends the process."""
    try:
        settings = load_settings(config)
    except RuntimeError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)

    setup_logging(settings)

    try:
        snapshot = fetch_snapshot(settings, file)
    except RuntimeError as e:
        logging.error("Could not get VATSIM data: %s", e)
        print(f"Could not get VATSIM data: {e}")
        raise typer.Exit(1)
    return settings, snapshot
