"""JSON-based settings persistence for the Hijri calendar."""

import json
import logging
import os

from hijri_date import LANGUAGES
from islamic_events import ALL_KEYS

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".hijri-calendar-settings.json")

_DEFAULTS = {
    "language": "en",
    "dark_mode": False,
    "window_width": None,
    "window_height": None,
    "events": list(ALL_KEYS),
    "highlight_color": "#059669",
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["events"] = list(_DEFAULTS["events"])
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", _SETTINGS_PATH)
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings

    if stored.get("language") in LANGUAGES:
        settings["language"] = stored["language"]
    if "dark_mode" in stored and isinstance(stored["dark_mode"], bool):
        settings["dark_mode"] = stored["dark_mode"]
    for key in ("window_width", "window_height"):
        if key in stored and isinstance(stored[key], int):
            settings[key] = stored[key]
    if "events" in stored and isinstance(stored["events"], list):
        settings["events"] = [k for k in stored["events"] if k in ALL_KEYS]
    if "highlight_color" in stored and isinstance(stored["highlight_color"], str):
        settings["highlight_color"] = stored["highlight_color"]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)
    logger.debug("Saved settings to %s", _SETTINGS_PATH)
