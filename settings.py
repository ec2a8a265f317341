"""JSON-based settings persistence for the calendar preview."""

import json
import logging
import os

from calendar_logic import DAY_ABBR

logger = logging.getLogger(__name__)

_ENV_VAR = "MONTHLY_CALENDAR_SETTINGS"
_DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".monthly-calendar-settings.json")

_DEFAULTS = {
    "dark_mode": False,
    "show_headers": True,
    "headers": list(DAY_ABBR),
    "cell_size": 64,
    "output": "calendar.png",
}


def settings_path(path: str | None = None) -> str:
    """Return the settings file location: explicit path, env override, or default."""
    if path:
        return path
    return os.environ.get(_ENV_VAR) or _DEFAULT_PATH


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["headers"] = list(_DEFAULTS["headers"])
    location = settings_path(path)
    try:
        with open(location, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (ValueError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", location, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", location)
        return settings
    for key in ("dark_mode", "show_headers"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    cell_size = stored.get("cell_size")
    if isinstance(cell_size, int) and not isinstance(cell_size, bool) and cell_size > 0:
        settings["cell_size"] = cell_size
    headers = stored.get("headers")
    if isinstance(headers, list) and len(headers) == 7 and all(isinstance(h, str) for h in headers):
        settings["headers"] = list(headers)
    if isinstance(stored.get("output"), str) and stored["output"]:
        settings["output"] = stored["output"]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    location = settings_path(path)
    with open(location, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    logger.debug("Saved settings to %s", location)
