"""
Configuration for the FAQ explorer.

Resolution order (later wins):
1. Built-in defaults
2. explorer.yaml (or the file named by FAQ_EXPLORER_CONFIG)
3. Environment variables (.env is loaded first)
"""

import os
import logging
import yaml
from pathlib import Path
from dataclasses import dataclass
from typing import Any, Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

CONFIG_FILE = Path(os.environ.get("FAQ_EXPLORER_CONFIG", "explorer.yaml"))
DATA_PATH = Path("data") / "all-faqs.json"

DEFAULT_THRESHOLD = 80
DEFAULT_INTRO_MARKER = "what is this faq"
FEATURED_SIZE = 5
PREVIEW_SIZE = 5
WEB_PORT = 5001


@dataclass(frozen=True)
class Settings:
    data_path: Path = DATA_PATH
    search_threshold: float = DEFAULT_THRESHOLD  # 0-100, higher = stricter
    ignore_location: bool = True
    intro_marker: str = DEFAULT_INTRO_MARKER
    featured_size: int = FEATURED_SIZE
    preview_size: int = PREVIEW_SIZE
    log_level: str = "INFO"
    port: int = WEB_PORT


def load_config_file(path: Optional[Path] = None) -> dict:
    """Load the YAML config file. Missing or empty file means no overrides."""
    path = path or CONFIG_FILE
    if not path.exists():
        return {}
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping, got %s", path, type(data).__name__)
        return {}
    return data


def _get_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def _as_number(name: str, raw: Any, default, cast):
    if raw is None:
        return default
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid %s=%r, using %r", name, raw, default)
        return default
    if value < 0:
        logger.warning("Negative %s=%r, using %r", name, raw, default)
        return default
    return value


def _as_bool(raw: Any, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in ("1", "true", "yes", "on")


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Build Settings from defaults, YAML file and environment."""
    file_cfg = load_config_file(config_path)

    def pick(env_name: str, key: str):
        env_value = _get_env(env_name)
        return env_value if env_value is not None else file_cfg.get(key)

    data_path = pick("FAQ_DATA_PATH", "data_path")
    intro_marker = pick("FAQ_INTRO_MARKER", "intro_marker")
    log_level = pick("LOG_LEVEL", "log_level")

    return Settings(
        data_path=Path(data_path) if data_path else DATA_PATH,
        search_threshold=_as_number(
            "search_threshold", pick("FAQ_SEARCH_THRESHOLD", "search_threshold"),
            DEFAULT_THRESHOLD, float,
        ),
        ignore_location=_as_bool(pick("FAQ_IGNORE_LOCATION", "ignore_location"), True),
        intro_marker=str(intro_marker) if intro_marker else DEFAULT_INTRO_MARKER,
        featured_size=_as_number(
            "featured_size", pick("FAQ_FEATURED_SIZE", "featured_size"), FEATURED_SIZE, int,
        ),
        preview_size=_as_number(
            "preview_size", pick("FAQ_PREVIEW_SIZE", "preview_size"), PREVIEW_SIZE, int,
        ),
        log_level=str(log_level).upper() if log_level else "INFO",
        port=_as_number("port", pick("FAQ_EXPLORER_PORT", "port"), WEB_PORT, int),
    )
