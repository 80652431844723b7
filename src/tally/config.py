"""Configuration management for Tally."""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

TALLY_HOME = Path(os.environ.get("TALLY_HOME", Path.home() / "tally"))
CONFIG_FILE = TALLY_HOME / "config" / "tally.conf"
DATA_DIR = TALLY_HOME / "data"
DEFAULT_DATABASE = DATA_DIR / "tally.sqlite3"


@dataclass
class Config:
    """Tally configuration."""

    database_path: str = str(DEFAULT_DATABASE)
    timezone: str = ""

    def tz(self) -> tzinfo | None:
        """Configured timezone, or None for the system local zone."""
        if self.timezone:
            try:
                return ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError):
                logger.warning(f"Unknown timezone {self.timezone!r}, using local time")
        return None

    def localize(self, naive: datetime) -> datetime:
        """Attach the zone rules in effect on that date to a naive datetime."""
        tz = self.tz()
        if tz is None:
            return naive.astimezone()
        return naive.replace(tzinfo=tz)


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from tally.conf, then apply environment overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                logger.warning(f"Ignoring malformed line in {path}: {line!r}")
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "database_path":
                    config.database_path = value
                case "timezone":
                    config.timezone = value
                case _:
                    logger.warning(f"Unknown config key {key!r} in {path}")

    if db := os.environ.get("TALLY_DATABASE"):
        config.database_path = db

    return config
