"""Status rule tables for stove status badges and displays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .const import (
    COLOR_ACCENT,
    COLOR_DANGER,
    COLOR_INFO,
    COLOR_NEUTRAL,
    COLOR_PRIMARY_BOLD,
    COLOR_SUCCESS,
    COLOR_WARNING,
    DEFAULT_LOCALE,
    ICON_CYCLE,
    ICON_FIRE,
    ICON_HOURGLASS,
    ICON_ROCKET,
    ICON_SLEEP,
    ICON_SNOW,
    ICON_THERMOMETER,
    ICON_UNKNOWN,
    ICON_WARNING,
    MARKER_ALARM,
    MARKER_CLEAN,
    MARKER_ERROR,
    MARKER_MODULATION,
    MARKER_OFF,
    MARKER_STANDBY,
    MARKER_START,
    MARKER_WAIT,
    MARKER_WORK,
)
from .i18n import translate
from .rules import RuleTable, fallback_rule, marker_rule

STATUS_ICON_RULES: RuleTable[str] = RuleTable(
    "status_icon",
    (
        marker_rule(MARKER_WORK, ICON_FIRE),
        marker_rule(MARKER_OFF, ICON_SNOW),
        marker_rule(MARKER_STANDBY, ICON_HOURGLASS),
        marker_rule(MARKER_ERROR, ICON_WARNING),
        fallback_rule(ICON_UNKNOWN),
    ),
    no_status=ICON_UNKNOWN,
)

STATUS_COLOR_RULES: RuleTable[str] = RuleTable(
    "status_color",
    (
        marker_rule(MARKER_WORK, COLOR_SUCCESS),
        marker_rule(MARKER_OFF, COLOR_NEUTRAL),
        marker_rule(MARKER_STANDBY, COLOR_WARNING),
        marker_rule(MARKER_ERROR, COLOR_PRIMARY_BOLD),
        fallback_rule(COLOR_NEUTRAL),
    ),
    no_status=COLOR_NEUTRAL,
)


def status_icon(status: str | None) -> str:
    """Return the icon key for ``status``."""

    return STATUS_ICON_RULES.resolve(status)


def status_color(status: str | None) -> str:
    """Return the semantic color key for ``status``."""

    return STATUS_COLOR_RULES.resolve(status)


def status_label(status: Any) -> str:
    """Return the label shown for ``status``: the raw token, or empty."""

    if not status:
        return ""
    return str(status)


@dataclass(frozen=True, slots=True)
class StoveStatusStyle:
    """Rule result describing how a stove status family is displayed."""

    label_key: str | None
    icon: str
    color_class: str
    animated: bool = False
    pulse: bool = False


@dataclass(frozen=True, slots=True)
class StoveStatusDisplay:
    """Resolved stove status display."""

    label: str
    icon: str
    color_class: str
    animated: bool
    pulse: bool


STOVE_STATUS_RULES: RuleTable[StoveStatusStyle] = RuleTable(
    "stove_status",
    (
        marker_rule(
            MARKER_WORK,
            StoveStatusStyle("stove_work", ICON_FIRE, COLOR_SUCCESS, True, True),
        ),
        marker_rule(
            MARKER_OFF, StoveStatusStyle("stove_off", ICON_SNOW, COLOR_NEUTRAL)
        ),
        marker_rule(
            MARKER_START,
            StoveStatusStyle("stove_start", ICON_ROCKET, COLOR_INFO, True, True),
        ),
        marker_rule(
            (MARKER_STANDBY, MARKER_WAIT),
            StoveStatusStyle("stove_standby", ICON_SLEEP, COLOR_WARNING, True),
        ),
        marker_rule(
            (MARKER_ERROR, MARKER_ALARM),
            StoveStatusStyle("stove_error", ICON_WARNING, COLOR_DANGER, True, True),
        ),
        marker_rule(
            MARKER_CLEAN,
            StoveStatusStyle("stove_clean", ICON_CYCLE, COLOR_ACCENT, True, True),
        ),
        marker_rule(
            MARKER_MODULATION,
            StoveStatusStyle("stove_modulation", ICON_THERMOMETER, COLOR_INFO, True),
        ),
        fallback_rule(StoveStatusStyle(None, ICON_UNKNOWN, COLOR_NEUTRAL)),
    ),
    no_status=StoveStatusStyle("stove_loading", ICON_HOURGLASS, COLOR_NEUTRAL, True),
)


def describe_stove_status(
    status: str | None, locale: str = DEFAULT_LOCALE
) -> StoveStatusDisplay:
    """Return the stove card display for a raw stove status.

    Matching is done on the upper-cased status so vendor casing does not
    matter here; unmatched statuses are shown upper-cased.
    """

    normalised = str(status).strip().upper() if status else ""
    style = STOVE_STATUS_RULES.resolve(normalised)
    if style.label_key is None:
        label = normalised
    else:
        label = translate(style.label_key, locale)
    return StoveStatusDisplay(
        label=label,
        icon=style.icon,
        color_class=style.color_class,
        animated=style.animated,
        pulse=style.pulse,
    )
