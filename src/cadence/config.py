"""Configuration management for Cadence."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.picker import QUOTE_WINDOW, SUGGESTION_WINDOW

logger = logging.getLogger(__name__)

CADENCE_HOME = Path(os.environ.get("CADENCE_HOME", Path.home() / "cadence"))
CONFIG_FILE = CADENCE_HOME / "config" / "cadence.conf"
DATA_DIR = CADENCE_HOME / "data"

BACKENDS = ("file", "supabase")


@dataclass
class Config:
    """Cadence configuration."""

    backend: str = "file"
    data_file: str = ""
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_access_token: str = ""
    user_id: str = ""
    quote_window: int = QUOTE_WINDOW
    suggestion_window: int = SUGGESTION_WINDOW

    @property
    def data_path(self) -> Path:
        """Where the file backend keeps tasks, completions and profile."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_DIR / "tracker.json"

    @property
    def quote_state_path(self) -> Path:
        """Quote rotation state, kept beside the data file."""
        return self.data_path.parent / "quote.json"


def _parse_value(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key.upper()}={value!r}, using {default}")
        return default
    if parsed < 1:
        logger.warning(f"Ignoring {key.upper()}={parsed}, must be at least 1")
        return default
    return parsed


def load_config() -> Config:
    """Load configuration from cadence.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        logger.debug(f"No config file at {CONFIG_FILE}, using defaults")
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _parse_value(value.strip())

        match key:
            case "backend":
                if value.lower() in BACKENDS:
                    config.backend = value.lower()
                else:
                    logger.warning(f"Unknown BACKEND={value!r}, expected one of {', '.join(BACKENDS)}")
            case "data_file":
                config.data_file = value
            case "supabase_url":
                config.supabase_url = value.rstrip("/")
            case "supabase_key":
                config.supabase_key = value
            case "supabase_access_token":
                config.supabase_access_token = value
            case "user_id":
                config.user_id = value
            case "quote_window":
                config.quote_window = _parse_int(key, value, QUOTE_WINDOW)
            case "suggestion_window":
                config.suggestion_window = _parse_int(key, value, SUGGESTION_WINDOW)

    return config
