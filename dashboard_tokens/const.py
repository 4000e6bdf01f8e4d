"""Constants for the dashboard presentation tokens."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

# Icon keys
ICON_FIRE: Final = "fire"
ICON_SNOW: Final = "snow"
ICON_HOURGLASS: Final = "hourglass"
ICON_WARNING: Final = "warning-triangle"
ICON_UNKNOWN: Final = "question-mark"
ICON_ROCKET: Final = "rocket"
ICON_CYCLE: Final = "cycle"
ICON_THERMOMETER: Final = "thermometer"
ICON_SLEEP: Final = "sleep"
ICON_GEAR: Final = "gear"
ICON_CLOCK: Final = "clock"
ICON_WRENCH: Final = "wrench"
ICON_SIGNAL_OFF: Final = "signal-off"
ICON_BATTERY_CRITICAL: Final = "battery-critical"
ICON_BATTERY_LOW: Final = "battery-low"

# Glyphs the renderer may use for each icon key
ICON_GLYPHS: Final[Mapping[str, str]] = {
    ICON_FIRE: "\U0001f525",
    ICON_SNOW: "❄️",
    ICON_HOURGLASS: "⏳",
    ICON_WARNING: "⚠️",
    ICON_UNKNOWN: "❔",
    ICON_ROCKET: "\U0001f680",
    ICON_CYCLE: "\U0001f504",
    ICON_THERMOMETER: "\U0001f321️",
    ICON_SLEEP: "\U0001f4a4",
    ICON_GEAR: "⚙️",
    ICON_CLOCK: "⏰",
    ICON_WRENCH: "\U0001f527",
    ICON_SIGNAL_OFF: "\U0001f4f5",
    ICON_BATTERY_CRITICAL: "\U0001faab",
    ICON_BATTERY_LOW: "\U0001f50b",
}

# Semantic color keys
COLOR_SUCCESS: Final = "success"
COLOR_NEUTRAL: Final = "neutral"
COLOR_WARNING: Final = "warning"
COLOR_PRIMARY_BOLD: Final = "primary-bold"
COLOR_ACCENT: Final = "accent"
COLOR_DANGER: Final = "danger"
COLOR_INFO: Final = "info"

# Palette names accepted as color keys alongside the semantic ones
COLOR_EMBER: Final = "ember"
COLOR_SAGE: Final = "sage"
COLOR_OCEAN: Final = "ocean"

COLOR_KEYS: Final = (
    COLOR_SUCCESS,
    COLOR_NEUTRAL,
    COLOR_WARNING,
    COLOR_PRIMARY_BOLD,
    COLOR_ACCENT,
    COLOR_DANGER,
    COLOR_INFO,
    COLOR_EMBER,
    COLOR_SAGE,
    COLOR_OCEAN,
)

# Stove status markers (matched by substring, case sensitive)
MARKER_WORK: Final = "WORK"
MARKER_OFF: Final = "OFF"
MARKER_STANDBY: Final = "STANDBY"
MARKER_ERROR: Final = "ERROR"
MARKER_START: Final = "START"
MARKER_WAIT: Final = "WAIT"
MARKER_ALARM: Final = "ALARM"
MARKER_CLEAN: Final = "CLEAN"
MARKER_MODULATION: Final = "MODULATION"

# Thermostat module battery states
BATTERY_LOW: Final = "low"
BATTERY_VERY_LOW: Final = "very_low"

# Locale and theme defaults
DEFAULT_LOCALE: Final = "en"
THEME_LIGHT: Final = "light"
THEME_DARK: Final = "dark"
DEFAULT_THEME: Final = THEME_LIGHT

# Heading
DEFAULT_HEADING_LEVEL: Final = 2
MIN_HEADING_LEVEL: Final = 1
MAX_HEADING_LEVEL: Final = 6

# Date format used for the semi-automatic return time
RETURN_TO_AUTO_FORMAT: Final = "%d/%m %H:%M"


def get_icon_glyph(icon: str | None) -> str:
    """Return the display glyph for ``icon``, or an empty string."""

    if not icon:
        return ""
    return ICON_GLYPHS.get(icon, "")
