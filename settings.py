"""JSON-based settings persistence for the mini date picker."""

import json
import os

from loguru import logger

from ordinals import ViewMode, WeekDay

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-date-picker-settings.json")

_DEFAULTS = {
    "dark_mode": False,
    "week_start": "monday",
    "show_iso_weeks": False,
    "lowest_mode": "day",
    "highest_mode": "decade",
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file {}: {}", _SETTINGS_PATH, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file {}: not a JSON object", _SETTINGS_PATH)
        return settings

    for key in ("dark_mode", "show_iso_weeks"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    week_start = stored.get("week_start")
    if isinstance(week_start, str) and WeekDay.parse(week_start) is not None:
        settings["week_start"] = week_start.strip().lower()
    for key in ("lowest_mode", "highest_mode"):
        value = stored.get(key)
        if isinstance(value, str) and ViewMode.parse(value) is not None:
            settings[key] = value.strip().lower()
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def picker_kwargs(settings: dict) -> dict:
    """Translate a settings dict into ``DatePicker`` keyword arguments."""
    return {
        "week_start": WeekDay.parse(settings["week_start"]),
        "show_iso_weeks": settings["show_iso_weeks"],
        "lowest_mode": ViewMode.parse(settings["lowest_mode"]),
        "highest_mode": ViewMode.parse(settings["highest_mode"]),
    }
