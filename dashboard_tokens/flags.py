"""Priority-ordered resolvers for boolean device flags."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
import logging
from typing import Any

from .const import (
    BATTERY_LOW,
    BATTERY_VERY_LOW,
    COLOR_ACCENT,
    COLOR_DANGER,
    COLOR_NEUTRAL,
    COLOR_SUCCESS,
    COLOR_WARNING,
    DEFAULT_LOCALE,
    ICON_BATTERY_CRITICAL,
    ICON_BATTERY_LOW,
    ICON_CLOCK,
    ICON_GEAR,
    ICON_SIGNAL_OFF,
    ICON_WRENCH,
    RETURN_TO_AUTO_FORMAT,
)
from .i18n import translate

_LOGGER = logging.getLogger(__name__)


class ControlMode(str, Enum):
    """Reachable scheduler control modes.

    ``semi_manual`` only has a meaning while the scheduler is enabled, so the
    ``enabled=False, semi_manual=True`` combination is ``MANUAL``.
    """

    SEMI_AUTOMATIC = "semi-automatic"
    AUTOMATIC = "automatic"
    MANUAL = "manual"


_MODE_DECISIONS: tuple[tuple[Callable[[bool, bool], bool], ControlMode], ...] = (
    (lambda enabled, semi_manual: enabled and semi_manual, ControlMode.SEMI_AUTOMATIC),
    (lambda enabled, semi_manual: enabled, ControlMode.AUTOMATIC),
    (lambda enabled, semi_manual: True, ControlMode.MANUAL),
)


def classify_mode(enabled: Any, semi_manual: Any = False) -> ControlMode:
    """Return the control mode for the scheduler flags."""

    enabled_flag = bool(enabled)
    semi_flag = bool(semi_manual)
    for predicate, mode in _MODE_DECISIONS:
        if predicate(enabled_flag, semi_flag):
            return mode
    return ControlMode.MANUAL


@dataclass(frozen=True, slots=True)
class ModePresentation:
    """Presentation tokens of a control mode."""

    mode: ControlMode
    icon: str
    color_class: str
    label: str


_MODE_TOKENS: Mapping[ControlMode, tuple[str, str, str]] = {
    ControlMode.SEMI_AUTOMATIC: (ICON_GEAR, COLOR_WARNING, "mode_semi_automatic"),
    ControlMode.AUTOMATIC: (ICON_CLOCK, COLOR_SUCCESS, "mode_automatic"),
    ControlMode.MANUAL: (ICON_WRENCH, COLOR_ACCENT, "mode_manual"),
}


def mode_presentation(
    mode: ControlMode, locale: str = DEFAULT_LOCALE
) -> ModePresentation:
    """Return the icon, color and label of ``mode``."""

    icon, color, label_key = _MODE_TOKENS[mode]
    return ModePresentation(
        mode=mode, icon=icon, color_class=color, label=translate(label_key, locale)
    )


def resolve_mode(
    enabled: Any, semi_manual: Any = False, locale: str = DEFAULT_LOCALE
) -> ModePresentation:
    """Resolve the scheduler flags to the mode indicator tokens."""

    return mode_presentation(classify_mode(enabled, semi_manual), locale)


def _parse_datetime(value: Any) -> datetime | None:
    """Return ``value`` as a ``datetime`` when possible."""

    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        _LOGGER.debug("Ignoring unparseable return-to-auto time: %r", value)
        return None


def format_return_to_auto(mode: ControlMode, return_at: Any) -> str | None:
    """Return the ``dd/mm HH:MM`` time the scheduler resumes, if shown.

    Only the semi-automatic mode shows a return time.  Timezone-aware values
    are formatted in their own offset.
    """

    if mode is not ControlMode.SEMI_AUTOMATIC:
        return None
    moment = _parse_datetime(return_at)
    if moment is None:
        return None
    return moment.strftime(RETURN_TO_AUTO_FORMAT)


class RoomSuffix(str, Enum):
    """Single connectivity/battery indicator shown next to a room."""

    OFFLINE = "offline"
    CRITICAL_BATTERY = "critical_battery"
    LOW_BATTERY = "low_battery"
    NONE = "none"


_SUFFIX_PRIORITY: tuple[tuple[str, RoomSuffix], ...] = (
    ("offline", RoomSuffix.OFFLINE),
    ("critical_battery", RoomSuffix.CRITICAL_BATTERY),
    ("low_battery", RoomSuffix.LOW_BATTERY),
)


def resolve_room_suffix(
    offline: Any = False, critical_battery: Any = False, low_battery: Any = False
) -> RoomSuffix:
    """Return the one suffix to show for a room.

    Priority is offline, then critical battery, then low battery: while a
    room is offline its battery readings are stale.
    """

    flags = {
        "offline": offline,
        "critical_battery": critical_battery,
        "low_battery": low_battery,
    }
    for flag, suffix in _SUFFIX_PRIORITY:
        if flags[flag]:
            return suffix
    return RoomSuffix.NONE


@dataclass(frozen=True, slots=True)
class SuffixPresentation:
    """Presentation tokens of a room suffix."""

    suffix: RoomSuffix
    icon: str | None
    color_class: str
    label: str
    pulse: bool = False


_SUFFIX_TOKENS: Mapping[RoomSuffix, tuple[str | None, str, str | None, bool]] = {
    RoomSuffix.OFFLINE: (ICON_SIGNAL_OFF, COLOR_NEUTRAL, "suffix_offline", False),
    RoomSuffix.CRITICAL_BATTERY: (
        ICON_BATTERY_CRITICAL,
        COLOR_DANGER,
        "suffix_critical_battery",
        True,
    ),
    RoomSuffix.LOW_BATTERY: (
        ICON_BATTERY_LOW,
        COLOR_WARNING,
        "suffix_low_battery",
        False,
    ),
    RoomSuffix.NONE: (None, COLOR_NEUTRAL, None, False),
}


def suffix_presentation(
    suffix: RoomSuffix, locale: str = DEFAULT_LOCALE
) -> SuffixPresentation:
    """Return the icon, color and label of ``suffix``."""

    icon, color, label_key, pulse = _SUFFIX_TOKENS[suffix]
    label = translate(label_key, locale) if label_key else ""
    return SuffixPresentation(
        suffix=suffix, icon=icon, color_class=color, label=label, pulse=pulse
    )


@dataclass(frozen=True, slots=True)
class RoomFlags:
    """Connectivity and battery flags of a room."""

    offline: bool = False
    critical_battery: bool = False
    low_battery: bool = False

    @classmethod
    def from_modules(cls, modules: Iterable[Mapping[str, Any]] | None) -> RoomFlags:
        """Derive the flags from the thermostat modules of a room.

        A room is offline when it has modules and none of them is reachable.
        ``very_low`` batteries count as both low and critical.
        """

        records = [item for item in modules or () if isinstance(item, Mapping)]
        offline = bool(records) and all(
            item.get("reachable") is False for item in records
        )
        states = {item.get("battery_state") for item in records}
        critical = BATTERY_VERY_LOW in states
        low = critical or BATTERY_LOW in states
        return cls(offline=offline, critical_battery=critical, low_battery=low)

    @property
    def suffix(self) -> RoomSuffix:
        """Return the suffix selected by these flags."""

        return resolve_room_suffix(
            self.offline, self.critical_battery, self.low_battery
        )
