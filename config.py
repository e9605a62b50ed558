"""Runtime settings for the habit tracker window."""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_TITLE = "Habit Tracker"
DEFAULT_GEOMETRY = "980x760"
DEFAULT_LOGO = "images/logo.png"
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    title: str = DEFAULT_TITLE
    geometry: str = DEFAULT_GEOMETRY
    logo_path: str = DEFAULT_LOGO
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        env = os.environ if environ is None else environ
        return cls(
            title=env.get("HABIT_TRACKER_TITLE", DEFAULT_TITLE),
            geometry=_parse_geometry(
                "HABIT_TRACKER_GEOMETRY", env.get("HABIT_TRACKER_GEOMETRY", DEFAULT_GEOMETRY)
            ),
            logo_path=env.get("HABIT_TRACKER_LOGO", DEFAULT_LOGO),
            log_level=_parse_level(
                "HABIT_TRACKER_LOG_LEVEL", env.get("HABIT_TRACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
            ),
            log_file=env.get("HABIT_TRACKER_LOG_FILE") or None,
        )

    def with_overrides(self, log_level=None, logo_path=None, geometry=None) -> "Config":
        """Apply command line values on top of the environment ones."""
        changes = {}
        if log_level:
            changes["log_level"] = _parse_level("--log-level", log_level)
        if logo_path:
            changes["logo_path"] = logo_path
        if geometry:
            changes["geometry"] = _parse_geometry("--geometry", geometry)
        return replace(self, **changes)


def _parse_level(source: str, raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"{source}: '{raw}' is not a log level. Expected one of {', '.join(LOG_LEVELS)}."
        )
    return level


def _parse_geometry(source: str, raw: str) -> str:
    """Accept Tk's WIDTHxHEIGHT form."""
    value = raw.strip().lower()
    width, sep, height = value.partition("x")
    if not sep or not width.isdigit() or not height.isdigit():
        raise ValueError(f"{source}: '{raw}' is not a WIDTHxHEIGHT geometry.")
    return value
