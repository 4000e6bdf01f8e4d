"""Token resolvers used by the dashboard components."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import logging
from typing import Any

from .compose import (
    PresentationOverrides,
    ResolvedPresentation,
    compose,
    normalise_classes,
)
from .const import (
    DEFAULT_HEADING_LEVEL,
    DEFAULT_LOCALE,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    get_icon_glyph,
)
from .flags import (
    ControlMode,
    RoomFlags,
    SuffixPresentation,
    format_return_to_auto,
    resolve_mode,
    resolve_room_suffix,
    suffix_presentation,
)
from .i18n import translate
from .status import STATUS_COLOR_RULES, STATUS_ICON_RULES, status_label
from .rules import RuleTable
from .variants import (
    CARD_SURFACES,
    DIVIDER_ORIENTATIONS,
    DIVIDER_SPACING,
    DIVIDER_VARIANTS,
    DIVIDER_VERTICAL_SPACING,
    GRID_COLUMNS,
    GRID_GAPS,
    HEADING_LEVEL_SIZES,
    HEADING_SIZES,
    HEADING_VARIANTS,
    LABEL_SIZES,
    LABEL_VARIANTS,
    LIQUID_MARKER,
    PAGINATION_STATES,
    STATUS_BADGE_SIZES,
    STATUS_BADGE_VARIANTS,
    TokenBundle,
    card_surface_intensity,
)

_LOGGER = logging.getLogger(__name__)

PULSE_CLASS = "animate-glow-pulse"

ExtraClasses = Iterable[str] | str | None


def _join(*bundles: TokenBundle, extra: ExtraClasses = None) -> tuple[str, ...]:
    """Return bundle classes in order followed by caller extras."""

    classes: list[str] = []
    for item in bundles:
        classes.extend(item.classes)
    classes.extend(normalise_classes(extra))
    return tuple(classes)


def resolve_presentation(
    status: str | None,
    *,
    overrides: PresentationOverrides | Mapping[str, Any] | None = None,
    size: Any = None,
    extra_classes: ExtraClasses = None,
    icon_rules: RuleTable[str] = STATUS_ICON_RULES,
    color_rules: RuleTable[str] = STATUS_COLOR_RULES,
) -> ResolvedPresentation:
    """Resolve a status token into a full presentation record.

    Icon and color come from their rule tables, the label is the raw status
    and the size class comes from the status badge size table.  Overrides
    replace whole fields and ``extra_classes`` are appended last.
    """

    resolved = ResolvedPresentation(
        icon=icon_rules.resolve(status),
        color_class=color_rules.resolve(status),
        label=status_label(status),
        size_class=STATUS_BADGE_SIZES.resolve(size).class_name,
    )
    return compose(resolved, overrides, extra_classes)


def status_badge(
    status: str | None = None,
    *,
    icon: str | None = None,
    color: str | None = None,
    text: str | None = None,
    size: Any = None,
    variant: Any = None,
    pulse: bool = False,
    extra_classes: ExtraClasses = None,
) -> ResolvedPresentation:
    """Return the presentation of a status badge."""

    base_classes = list(STATUS_BADGE_VARIANTS.resolve(variant).classes)
    if pulse:
        base_classes.append(PULSE_CLASS)
    resolved = resolve_presentation(status, size=size, extra_classes=base_classes)
    overrides = {"icon": icon, "color_class": color, "label": text}
    return compose(resolved, overrides, extra_classes)


@dataclass(frozen=True, slots=True)
class ModeIndicatorPresentation:
    """Presentation of the scheduler mode indicator."""

    mode: ControlMode
    presentation: ResolvedPresentation
    subtitle: str
    return_to_auto: str | None = None


def mode_indicator(
    enabled: Any,
    semi_manual: Any = False,
    *,
    return_to_auto_at: Any = None,
    locale: str = DEFAULT_LOCALE,
    extra_classes: ExtraClasses = None,
) -> ModeIndicatorPresentation:
    """Return the mode indicator tokens for the scheduler flags."""

    mode = resolve_mode(enabled, semi_manual, locale)
    presentation = compose(
        ResolvedPresentation(
            icon=mode.icon, color_class=mode.color_class, label=mode.label
        ),
        extra_classes=extra_classes,
    )
    when = format_return_to_auto(mode.mode, return_to_auto_at)
    return ModeIndicatorPresentation(
        mode=mode.mode,
        presentation=presentation,
        subtitle=translate("mode_subtitle", locale),
        return_to_auto=(
            translate("return_to_auto", locale, when=when) if when else None
        ),
    )


@dataclass(frozen=True, slots=True)
class RoomOption:
    """Room selector option with its single status suffix."""

    name: str
    label: str
    suffix: SuffixPresentation


def room_option(
    name: Any,
    *,
    offline: Any = False,
    critical_battery: Any = False,
    low_battery: Any = False,
    locale: str = DEFAULT_LOCALE,
) -> RoomOption:
    """Return the selector option for a room."""

    room_name = str(name) if name is not None else ""
    suffix = suffix_presentation(
        resolve_room_suffix(offline, critical_battery, low_battery), locale
    )
    glyph = get_icon_glyph(suffix.icon)
    label = f"{room_name} {glyph}" if glyph else room_name
    return RoomOption(name=room_name, label=label, suffix=suffix)


def room_options(
    rooms: Iterable[Mapping[str, Any]], *, locale: str = DEFAULT_LOCALE
) -> list[RoomOption]:
    """Return selector options for room records.

    Each record carries ``name`` and either the three flags or a
    ``modules`` list from which the flags are derived.
    """

    options: list[RoomOption] = []
    for room in rooms:
        if not isinstance(room, Mapping):
            _LOGGER.debug("Skipping invalid room record: %r", room)
            continue
        if "modules" in room:
            flags = RoomFlags.from_modules(room.get("modules"))
        else:
            flags = RoomFlags(
                offline=bool(room.get("offline")),
                critical_battery=bool(room.get("critical_battery")),
                low_battery=bool(room.get("low_battery")),
            )
        options.append(
            room_option(
                room.get("name"),
                offline=flags.offline,
                critical_battery=flags.critical_battery,
                low_battery=flags.low_battery,
                locale=locale,
            )
        )
    return options


@dataclass(frozen=True, slots=True)
class CardStyle:
    """Resolved card surface."""

    surface: str
    classes: tuple[str, ...]
    liquid: bool
    intensity: int


def card(surface: Any = None, *, extra_classes: ExtraClasses = None) -> CardStyle:
    """Return the classes and liquid marker of a card surface."""

    key = CARD_SURFACES.normalise_key(surface)
    surface_bundle = CARD_SURFACES.resolve(key)
    return CardStyle(
        surface=key,
        classes=_join(surface_bundle, extra=extra_classes),
        liquid=surface_bundle.has_marker(LIQUID_MARKER),
        intensity=card_surface_intensity(key),
    )


@dataclass(frozen=True, slots=True)
class HeadingStyle:
    """Resolved heading element and classes."""

    tag: str
    size: str
    classes: tuple[str, ...]


def _heading_level(level: Any) -> int:
    if isinstance(level, bool):
        return DEFAULT_HEADING_LEVEL
    try:
        value = int(level)
    except (TypeError, ValueError):
        return DEFAULT_HEADING_LEVEL
    if MIN_HEADING_LEVEL <= value <= MAX_HEADING_LEVEL:
        return value
    return DEFAULT_HEADING_LEVEL


def heading(
    level: Any = DEFAULT_HEADING_LEVEL,
    *,
    size: Any = None,
    variant: Any = None,
    extra_classes: ExtraClasses = None,
) -> HeadingStyle:
    """Return the heading tag and classes.

    The size follows the level unless an explicit, known ``size`` is given.
    """

    heading_level = _heading_level(level)
    if size in HEADING_SIZES:
        size_key = size
    else:
        size_key = HEADING_LEVEL_SIZES.resolve(heading_level)
    return HeadingStyle(
        tag=f"h{heading_level}",
        size=size_key,
        classes=_join(
            HEADING_SIZES.resolve(size_key),
            HEADING_VARIANTS.resolve(variant),
            extra=extra_classes,
        ),
    )


def divider(
    orientation: Any = None,
    *,
    spacing: Any = None,
    variant: Any = None,
    extra_classes: ExtraClasses = None,
) -> tuple[str, ...]:
    """Return divider classes."""

    orientation_key = DIVIDER_ORIENTATIONS.normalise_key(orientation)
    spacing_table = (
        DIVIDER_VERTICAL_SPACING if orientation_key == "vertical" else DIVIDER_SPACING
    )
    return _join(
        DIVIDER_ORIENTATIONS.resolve(orientation_key),
        spacing_table.resolve(spacing),
        DIVIDER_VARIANTS.resolve(variant),
        extra=extra_classes,
    )


def label(
    size: Any = None, *, variant: Any = None, extra_classes: ExtraClasses = None
) -> tuple[str, ...]:
    """Return form label classes."""

    return _join(
        LABEL_SIZES.resolve(size), LABEL_VARIANTS.resolve(variant), extra=extra_classes
    )


def grid(
    cols: Any = None, *, gap: Any = None, extra_classes: ExtraClasses = None
) -> tuple[str, ...]:
    """Return responsive grid classes."""

    return _join(
        TokenBundle(classes=("grid",)),
        GRID_COLUMNS.resolve(cols),
        GRID_GAPS.resolve(gap),
        extra=extra_classes,
    )


def pagination_button(
    *, disabled: bool = False, current: bool = False, extra_classes: ExtraClasses = None
) -> tuple[str, ...]:
    """Return pagination button classes; disabled wins over current."""

    if disabled:
        state = "disabled"
    elif current:
        state = "current"
    else:
        state = "enabled"
    return _join(PAGINATION_STATES.resolve(state), extra=extra_classes)
