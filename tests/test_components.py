"""Tests for the component token resolvers."""

from __future__ import annotations

from datetime import datetime

import pytest

from dashboard_tokens.components import (
    PULSE_CLASS,
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
from dashboard_tokens.config import build_status_rule_tables
from dashboard_tokens.flags import ControlMode, RoomSuffix


def test_resolve_presentation_for_error_status() -> None:
    """Error statuses resolve to the error tokens with the raw label."""

    result = resolve_presentation("IGNITION ERROR")

    assert result.icon == "warning-triangle"
    assert result.color_class == "primary-bold"
    assert result.label == "IGNITION ERROR"
    assert result.size_class == "text-sm px-3 py-1.5"


def test_resolve_presentation_absent_vs_unknown() -> None:
    """Absent and unknown statuses share tokens but not the label."""

    absent = resolve_presentation(None)
    unknown = resolve_presentation("MYSTERY")

    assert (absent.icon, absent.color_class) == (unknown.icon, unknown.color_class)
    assert absent.label == ""
    assert unknown.label == "MYSTERY"


def test_resolve_presentation_with_custom_tables() -> None:
    """Callers may supply their own rule tables."""

    icons, colors = build_status_rule_tables(
        [{"marker": "ECO", "icon": "leaf", "color": "success"}]
    )

    result = resolve_presentation("ECO MODE", icon_rules=icons, color_rules=colors)

    assert result.icon == "leaf"
    assert result.color_class == "success"


def test_status_badge_overrides_and_extras() -> None:
    """Explicit props win and extra classes come after base classes."""

    result = status_badge(
        "WORK", icon="gear", size="lg", variant="dot", pulse=True, extra_classes="ml-2"
    )

    assert result.icon == "gear"
    assert result.color_class == "success"
    assert result.label == "WORK"
    assert result.size_class == "text-base px-4 py-2"
    assert result.extra_classes == ("inline-block", "rounded-full", PULSE_CLASS, "ml-2")


def test_status_badge_defaults() -> None:
    """Unknown size and variant fall back to their defaults."""

    assert status_badge("OFF", size="huge", variant="blob") == status_badge("OFF")
    assert status_badge("OFF", text="Spenta").label == "Spenta"
    assert status_badge("OFF", color="danger").color_class == "danger"


def test_mode_indicator_semi_automatic_shows_return_time() -> None:
    """Semi-automatic mode includes the return-to-automatic time."""

    result = mode_indicator(
        True, True, return_to_auto_at=datetime(2025, 10, 10, 18, 30)
    )

    assert result.mode is ControlMode.SEMI_AUTOMATIC
    assert result.presentation.icon == "gear"
    assert result.presentation.label == "semi-automatic"
    assert result.subtitle == "Control mode"
    assert result.return_to_auto == "Return to automatic: 10/10 18:30"


def test_mode_indicator_automatic_hides_return_time() -> None:
    """Other modes never show a return time."""

    result = mode_indicator(True, False, return_to_auto_at="2025-10-10T18:30:00")

    assert result.mode is ControlMode.AUTOMATIC
    assert result.return_to_auto is None


def test_room_option_single_suffix() -> None:
    """Only the highest priority suffix is attached."""

    option = room_option("Living", offline=True, critical_battery=True)

    assert option.suffix.suffix is RoomSuffix.OFFLINE
    assert option.label.startswith("Living ")
    assert option.label != "Living"


def test_room_option_without_suffix() -> None:
    """Rooms without flags keep their plain name."""

    option = room_option("Kitchen")

    assert option.label == "Kitchen"
    assert option.suffix.suffix is RoomSuffix.NONE


def test_room_options_from_records() -> None:
    """Room records may carry flags or module lists."""

    options = room_options(
        [
            {"name": "Bedroom", "low_battery": True},
            {"name": "Office", "modules": [{"reachable": False}]},
            "invalid",
        ]
    )

    assert [option.name for option in options] == ["Bedroom", "Office"]
    assert options[0].suffix.suffix is RoomSuffix.LOW_BATTERY
    assert options[1].suffix.suffix is RoomSuffix.OFFLINE


@pytest.mark.parametrize(
    "surface, liquid, intensity",
    [
        ("solid", False, 0),
        ("glass", False, 1),
        ("liquid", True, 2),
        ("liquid-enhanced", True, 3),
        ("unknown", False, 0),
        (None, False, 0),
    ],
)
def test_card(surface, liquid, intensity) -> None:
    """Card surfaces expose the liquid marker and intensity."""

    result = card(surface)

    assert result.liquid is liquid
    assert result.intensity == intensity


def test_card_extra_classes_are_appended() -> None:
    """Extra classes follow the surface classes."""

    result = card("glass", extra_classes=["p-6"])

    assert result.surface == "glass"
    assert result.classes[-1] == "p-6"
    assert "backdrop-blur-xl" in result.classes


@pytest.mark.parametrize(
    "level, size_class", [(1, "text-3xl"), (3, "text-xl"), (5, "text-base"), (6, "text-sm")]
)
def test_heading_size_follows_level(level, size_class) -> None:
    """Without an explicit size the level decides the size."""

    result = heading(level)

    assert result.tag == f"h{level}"
    assert size_class in result.classes


def test_heading_explicit_size_wins() -> None:
    """An explicit size overrides the level-derived size."""

    result = heading(1, size="sm")

    assert result.size == "sm"
    assert "text-sm" in result.classes
    assert "text-3xl" not in result.classes


def test_heading_invalid_inputs_use_defaults() -> None:
    """Invalid levels and sizes fall back to level 2 and its size."""

    result = heading("seven", size="giant", variant="neon")

    assert result.tag == "h2"
    assert result.size == "2xl"
    assert result.classes == ("text-2xl", "text-slate-100")
    assert heading(9).tag == "h2"
    assert heading(True).tag == "h2"
    assert heading(False).tag == "h2"


def test_divider_orientation_selects_spacing_axis() -> None:
    """Vertical dividers space on the horizontal axis."""

    assert divider() == ("w-full", "h-px", "my-4", "bg-slate-700")
    assert divider("vertical", spacing="sm", variant="dashed") == (
        "h-full",
        "w-px",
        "mx-2",
        "border-t",
        "border-dashed",
        "border-slate-600",
    )


def test_label_classes() -> None:
    """Label size and variant classes precede extras."""

    assert label() == ("text-sm", "text-slate-300", "font-medium")
    assert label("lg", variant="muted", extra_classes="block") == (
        "text-base",
        "text-slate-500",
        "block",
    )


def test_grid_classes() -> None:
    """Grid classes combine columns and gap with defaults."""

    assert grid(2, gap="none") == ("grid", "grid-cols-1", "sm:grid-cols-2", "gap-0")
    assert grid() == grid(3, gap="md")


def test_pagination_button_states() -> None:
    """Disabled wins over current."""

    assert "cursor-not-allowed" in pagination_button(disabled=True, current=True)
    assert "bg-ember-500" in pagination_button(current=True)
    assert pagination_button(extra_classes="w-9")[-1] == "w-9"
