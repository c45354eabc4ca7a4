"""Configuration management."""

import configparser
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from koyomi.errors import ConfigError
from koyomi.models import Weekday

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "koyomi" / "config.ini"

_WEEK_STARTS = {
    "monday": Weekday.MONDAY,
    "sunday": Weekday.SUNDAY,
}


def _parse_week_start(value: str) -> Weekday:
    try:
        return _WEEK_STARTS[value.strip().lower()]
    except KeyError:
        msg = f"Week start must be 'monday' or 'sunday', got {value!r}"
        raise ConfigError(msg) from None


def _parse_today(value: str) -> date | None:
    if not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        msg = f"Today override must be an ISO date (YYYY-MM-DD), got {value!r}"
        raise ConfigError(msg) from e


@dataclass
class Config:
    """Display configuration for the calendar."""

    week_start: Weekday = Weekday.MONDAY
    today: date | None = None

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        week_start = os.environ.get("KOYOMI_WEEK_START")
        today = os.environ.get("KOYOMI_TODAY")
        if week_start is None and today is None:
            return None
        return cls(
            week_start=_parse_week_start(week_start) if week_start else Weekday.MONDAY,
            today=_parse_today(today) if today else None,
        )

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path, encoding="utf-8")
        if not config.has_section("koyomi"):
            msg = f"Missing [koyomi] section in {path}"
            raise ConfigError(msg)
        section = config["koyomi"]
        return cls(
            week_start=_parse_week_start(section.get("weekStart", "monday")),
            today=_parse_today(section.get("today", "")),
        )

    def resolve_today(self) -> date:
        """Return the configured override, or the host's local date."""
        return self.today or date.today()
