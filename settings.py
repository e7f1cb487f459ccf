"""JSON-based settings persistence for the leave calendar.

Only display preferences live here; holiday and leave data are supplied by
the embedding application and never written to disk.
"""

import copy
import json
import os

_SETTINGS_PATH = os.environ.get(
    "LEAVE_CALENDAR_SETTINGS",
    os.path.join(os.path.expanduser("~"), ".leave-calendar-settings.json"),
)


def hex_color(value: int) -> str:
    """Turn an integer colour literal into a tkinter ``#RRGGBB`` string.

    32-bit values (e.g. ``0xFF5C8AFF``) keep only their low 24 bits.
    """
    red = (value & 0xFF0000) >> 16
    green = (value & 0xFF00) >> 8
    blue = value & 0xFF
    return f"#{red:02X}{green:02X}{blue:02X}"


_DEFAULTS = {
    "colors": {
        "holiday_bg": hex_color(0xEFFFEE),
        "today_fg": hex_color(0xFF5C8AFF),
        "primary_fg": hex_color(0x000000),
        "other_month_fg": hex_color(0x8E8E93),
        "leave_bg": hex_color(0xFFE7E8EA),
        "leave_fg": hex_color(0x000000),
    },
    "cell_width": 56,
    "cell_height": 66,
    "match_year": True,
    "log_level": "WARNING",
}

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = copy.deepcopy(_DEFAULTS)
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return settings
    if not isinstance(stored, dict):
        return settings

    if "colors" in stored and isinstance(stored["colors"], dict):
        for key, value in stored["colors"].items():
            if key in settings["colors"] and isinstance(value, str):
                settings["colors"][key] = value
    for key in ("cell_width", "cell_height"):
        value = stored.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            settings[key] = value
    if "match_year" in stored and isinstance(stored["match_year"], bool):
        settings["match_year"] = stored["match_year"]
    level = stored.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        settings["log_level"] = level.upper()
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
