"""Tests for theme defaults."""

from __future__ import annotations

import pytest

from dashboard_tokens.components import status_badge
from dashboard_tokens.compose import ResolvedPresentation
from dashboard_tokens.theme import (
    Theme,
    normalise_theme,
    render_classes,
    theme_classes,
    theme_colors,
    toggle_theme,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("dark", Theme.DARK),
        (" DARK ", Theme.DARK),
        ("light", Theme.LIGHT),
        (Theme.DARK, Theme.DARK),
        ("sepia", Theme.LIGHT),
        (None, Theme.LIGHT),
        (1, Theme.LIGHT),
    ],
)
def test_normalise_theme(value, expected) -> None:
    """Unknown themes fall back to light."""

    assert normalise_theme(value) is expected


def test_toggle_theme() -> None:
    """Toggling flips the theme; unknown input toggles from light."""

    assert toggle_theme("dark") is Theme.LIGHT
    assert toggle_theme("light") is Theme.DARK
    assert toggle_theme(None) is Theme.DARK


def test_theme_colors_differ_per_theme() -> None:
    """Each semantic color has distinct light and dark classes."""

    dark = theme_colors("success", Theme.DARK)
    light = theme_colors("success", Theme.LIGHT)

    assert dark.text == "text-sage-300"
    assert light.text == "text-sage-700"


def test_unknown_color_uses_neutral() -> None:
    """Unknown color keys resolve to the neutral palette."""

    assert theme_colors("chartreuse", "dark") == theme_colors("neutral", "dark")
    assert theme_colors(None) == theme_colors("neutral", Theme.LIGHT)


def test_theme_classes_split_compound_values() -> None:
    """Compound class values are split into single classes."""

    classes = theme_classes("primary-bold", Theme.DARK)

    assert "font-bold" in classes
    assert classes[0] == "bg-ember-500/30"


def test_render_classes_orders_theme_size_extras() -> None:
    """Theme colors come first, then size classes, then extras."""

    presentation = ResolvedPresentation(
        icon="fire",
        color_class="warning",
        label="STANDBY",
        size_class="text-sm",
        extra_classes=("mt-2",),
    )

    assert render_classes(presentation, "light") == (
        "bg-warning-500/15",
        "border-warning-400/25",
        "text-warning-700",
        "text-sm",
        "mt-2",
    )


@pytest.mark.parametrize(
    "color, semantic", [("ember", "accent"), ("sage", "success"), ("ocean", "info")]
)
def test_palette_names_render_their_palette(color, semantic) -> None:
    """Badge palette names share the palette of their semantic key."""

    assert theme_colors(color, "dark") == theme_colors(semantic, "dark")
    assert theme_colors(color, "dark").text == f"text-{color}-300"
    assert theme_colors(color, "dark") != theme_colors("neutral", "dark")


def test_palette_color_override_renders_palette_classes() -> None:
    """A badge colored with a palette name keeps that palette in the output."""

    classes = render_classes(status_badge("OFF", color="ember"), "light")

    assert "text-ember-700" in classes
    assert "text-slate-600" not in classes
