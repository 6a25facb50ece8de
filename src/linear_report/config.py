"""Configuration management for linear-report."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_REPORTS_DIR_NAME = "reports"


@dataclass
class Config:
    """linear-report configuration."""

    linear_api_key: str = ""
    save_to_desktop: bool = False
    reports_dir_name: str = DEFAULT_REPORTS_DIR_NAME
    lookback_days: int = 7
    upcoming_priority_ceiling: int = 2

    def reports_dir(self, cwd: Path | None = None, home: Path | None = None) -> Path:
        """Directory the reports are written to."""
        if self.save_to_desktop:
            base = (home or Path.home()) / "Desktop"
        else:
            base = cwd or Path.cwd()
        return base / self.reports_dir_name


def _parse_int(environ: Mapping[str, str], key: str, default: int) -> int:
    value = environ.get(key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key}={value!r}, using {default}")
        return default


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """
    Load configuration from the process environment.

    When no mapping is given, a .env file in the working directory is loaded
    first. Variables already set in the environment take precedence.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Config(
        linear_api_key=environ.get("LINEAR_API_KEY", "").strip(),
        save_to_desktop=environ.get("SAVE_TO_DESKTOP", "").strip().lower() == "true",
        reports_dir_name=environ.get("REPORTS_DIR_NAME", "").strip() or DEFAULT_REPORTS_DIR_NAME,
        lookback_days=_parse_int(environ, "REPORT_LOOKBACK_DAYS", 7),
        upcoming_priority_ceiling=_parse_int(environ, "UPCOMING_PRIORITY_CEILING", 2),
    )
