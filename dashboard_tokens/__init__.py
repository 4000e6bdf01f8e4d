"""Presentation tokens for the home heating dashboard."""

from .compose import PresentationOverrides, ResolvedPresentation, compose
from .components import (
    CardStyle,
    HeadingStyle,
    ModeIndicatorPresentation,
    RoomOption,
    card,
    divider,
    grid,
    heading,
    label,
    mode_indicator,
    pagination_button,
    resolve_presentation,
    room_option,
    room_options,
    status_badge,
)
from .config import build_status_rule_tables, validate_dashboard_options
from .dialog import ConfirmDialog, DialogOutcome, ScrollLock
from .errors import TokenTableError
from .flags import (
    ControlMode,
    ModePresentation,
    RoomFlags,
    RoomSuffix,
    SuffixPresentation,
    classify_mode,
    format_return_to_auto,
    resolve_mode,
    resolve_room_suffix,
    suffix_presentation,
)
from .rules import Rule, RuleTable, fallback_rule, marker_rule, resolve
from .status import (
    STATUS_COLOR_RULES,
    STATUS_ICON_RULES,
    StoveStatusDisplay,
    describe_stove_status,
    status_color,
    status_icon,
    status_label,
)
from .theme import Theme, normalise_theme, render_classes, theme_classes
from .variants import TokenBundle, VariantTable, resolve_variant

__all__ = [
    "STATUS_COLOR_RULES",
    "STATUS_ICON_RULES",
    "CardStyle",
    "ConfirmDialog",
    "ControlMode",
    "DialogOutcome",
    "HeadingStyle",
    "ModeIndicatorPresentation",
    "ModePresentation",
    "PresentationOverrides",
    "ResolvedPresentation",
    "RoomFlags",
    "RoomOption",
    "RoomSuffix",
    "Rule",
    "RuleTable",
    "ScrollLock",
    "StoveStatusDisplay",
    "SuffixPresentation",
    "Theme",
    "TokenBundle",
    "TokenTableError",
    "VariantTable",
    "build_status_rule_tables",
    "card",
    "classify_mode",
    "compose",
    "describe_stove_status",
    "divider",
    "fallback_rule",
    "format_return_to_auto",
    "grid",
    "heading",
    "label",
    "marker_rule",
    "mode_indicator",
    "normalise_theme",
    "pagination_button",
    "render_classes",
    "resolve",
    "resolve_mode",
    "resolve_presentation",
    "resolve_room_suffix",
    "resolve_variant",
    "room_option",
    "room_options",
    "status_badge",
    "status_color",
    "status_icon",
    "status_label",
    "suffix_presentation",
    "theme_classes",
    "validate_dashboard_options",
]
