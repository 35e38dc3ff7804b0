"""VATSIM data provider.

Fetches the V3 data feed once, before the TUI starts:

1. Query the status endpoint, which lists the mirrors serving V3 data.
2. Pick one mirror at random.
3. Download the V3 document, parse it, sort both entity lists by callsign.

Any failure raises SnapshotError; callers treat it as fatal.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json
import logging
import random
import urllib.error
import urllib.request

from vatview.config import Settings
from vatview.models import Snapshot, SnapshotError


class Vatsim:
    """Access to the VATSIM V3 API.

    Constructing an instance makes the status request to find the V3 URL.
    """

    def __init__(self, settings: Settings | None = None):
        logging.debug("Creating Vatsim instance")
        self.settings = settings or Settings()
        self.v3_url = self._get_v3_url()

    def _get_v3_url(self) -> str:
        logging.debug("Getting V3 url from status page %s", self.settings.status_url)
        status = self._get_json(self.settings.status_url, "status")
        try:
            urls = status["data"]["v3"]
        except (KeyError, TypeError) as e:
            raise SnapshotError(f"Malformed status data: {e!r}") from e
        if not urls:
            raise SnapshotError("No V3 URLs returned")
        url = random.choice(urls)
        logging.debug("V3 URL: %s", url)
        return url

    def get_data(self) -> Snapshot:
        """Download and parse the current network data."""
        logging.debug("Getting current data")
        raw = self._get_json(self.v3_url, "V3 data")
        snapshot = Snapshot.from_dict(raw).sorted_by_callsign()
        logging.debug(
            "Got %d pilots, %d controllers",
            len(snapshot.pilots),
            len(snapshot.controllers),
        )
        return snapshot

    def _get_json(self, url: str, what: str) -> Any:
        req = urllib.request.Request(
            url,
            headers={
                "User-Agent": self.settings.user_agent,
                "Accept": "application/json",
            },
        )
        try:
            with urllib.request.urlopen(req, timeout=self.settings.timeout) as resp:
                status = getattr(resp, "status", 200)
                if not 200 <= status < 300:
                    raise SnapshotError(f"Got status {status} from {what} endpoint")
                body = resp.read()
        except urllib.error.HTTPError as e:
            raise SnapshotError(f"Got status {e.code} from {what} endpoint") from e
        except (urllib.error.URLError, TimeoutError, OSError) as e:
            raise SnapshotError(f"Could not reach {what} endpoint: {e}") from e

        try:
            return json.loads(body)
        except ValueError as e:
            raise SnapshotError(f"Invalid JSON from {what} endpoint: {e}") from e


def load_snapshot_file(path: Path) -> Snapshot:
    """Load a saved V3 document from disk (offline mode)."""
    logging.debug("Loading snapshot from %s", path)
    try:
        raw = json.loads(Path(path).read_text())
    except OSError as e:
        raise SnapshotError(f"Could not read {path}: {e}") from e
    except ValueError as e:
        raise SnapshotError(f"Invalid JSON in {path}: {e}") from e
    return Snapshot.from_dict(raw).sorted_by_callsign()


def fetch_snapshot(settings: Settings, path: Path | None = None) -> Snapshot:
    """Snapshot from a file when given, otherwise from the network."""
    if path is not None:
        return load_snapshot_file(path)
    return Vatsim(settings).get_data()
