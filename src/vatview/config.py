"""Viewer settings.

Settings come from an optional YAML file and environment variables:

  VATVIEW_CONFIG       path to the YAML file (default ~/.config/vatview/config.yml)
  VATVIEW_STATUS_URL   status endpoint used to discover the V3 data URL
  VATVIEW_USER_AGENT   User-Agent sent with every request
  VATVIEW_TIMEOUT      request timeout in seconds
  VATVIEW_LOG_FILE     where the log is written
  VATVIEW_LOG_LEVEL    logging level name
  VATVIEW_BROWSER_URL  page opened for an entity, with a {cid} placeholder

Environment variables win over the file.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import logging
import os

import yaml


STATUS_URL = "https://status.vatsim.net/status.json"
USER_AGENT = "github.com/celeo/vatsim_online"
BROWSER_URL = "https://stats.vatsim.net/stats/{cid}"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    status_url: str = STATUS_URL
    user_agent: str = USER_AGENT
    timeout: float = 10.0
    log_file: Path = Path("output.log")
    log_level: str = "DEBUG"
    browser_url: str = BROWSER_URL


_ENV = {
    "status_url": "VATVIEW_STATUS_URL",
    "user_agent": "VATVIEW_USER_AGENT",
    "timeout": "VATVIEW_TIMEOUT",
    "log_file": "VATVIEW_LOG_FILE",
    "log_level": "VATVIEW_LOG_LEVEL",
    "browser_url": "VATVIEW_BROWSER_URL",
}


def default_config_path() -> Path:
    env = os.environ.get("VATVIEW_CONFIG")
    if env:
        return Path(env)
    return Path.home() / ".config" / "vatview" / "config.yml"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from YAML (if present) and the environment.

    Raises RuntimeError on a malformed file or value.
    """
    cfg_path = path or default_config_path()

    values: dict = {}
    if cfg_path.exists():
        raw = yaml.safe_load(cfg_path.read_text())
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid config file (expected a mapping): {cfg_path}")
        known = {f.name for f in fields(Settings)}
        values.update({k: v for k, v in raw.items() if k in known})
    elif path is not None:
        raise RuntimeError(f"Config file not found: {cfg_path}")

    for name, env_name in _ENV.items():
        env_value = os.environ.get(env_name)
        if env_value:
            values[name] = env_value

    return _coerce(replace(Settings(), **values))


def _coerce(settings: Settings) -> Settings:
    try:
        timeout = float(settings.timeout)
    except (TypeError, ValueError):
        raise RuntimeError(f"Invalid timeout: {settings.timeout!r}") from None
    if timeout <= 0:
        raise RuntimeError(f"Invalid timeout: {settings.timeout!r}")

    level = str(settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Invalid log level: {settings.log_level!r}")

    browser_url = str(settings.browser_url)
    try:
        browser_url.format(cid=0)
    except (KeyError, IndexError, ValueError):
        raise RuntimeError(
            f"Invalid browser_url (only a {{cid}} placeholder is allowed): {browser_url!r}"
        ) from None

    return replace(
        settings,
        timeout=timeout,
        log_file=Path(settings.log_file),
        log_level=level,
        status_url=str(settings.status_url),
        user_agent=str(settings.user_agent),
        browser_url=browser_url,
    )


def setup_logging(settings: Settings) -> None:
    """Send log records to the settings' log file, never to the terminal."""
    logging.basicConfig(
        filename=settings.log_file,
        level=getattr(logging, settings.log_level),
        format=LOG_FORMAT,
    )
