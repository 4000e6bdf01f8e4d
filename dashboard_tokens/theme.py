"""Light and dark theme defaults for semantic color keys."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from .compose import ResolvedPresentation
from .const import (
    COLOR_ACCENT,
    COLOR_DANGER,
    COLOR_EMBER,
    COLOR_INFO,
    COLOR_NEUTRAL,
    COLOR_OCEAN,
    COLOR_PRIMARY_BOLD,
    COLOR_SAGE,
    COLOR_SUCCESS,
    COLOR_WARNING,
    DEFAULT_THEME,
    THEME_DARK,
    THEME_LIGHT,
)


class Theme(str, Enum):
    """Supported dashboard themes."""

    LIGHT = THEME_LIGHT
    DARK = THEME_DARK


def normalise_theme(value: Any) -> Theme:
    """Return ``value`` as a ``Theme``; unknown values map to the default."""

    if isinstance(value, Theme):
        return value
    if isinstance(value, str):
        try:
            return Theme(value.strip().lower())
        except ValueError:
            pass
    return Theme(DEFAULT_THEME)


def toggle_theme(value: Any) -> Theme:
    """Return the opposite of ``value``."""

    return Theme.LIGHT if normalise_theme(value) is Theme.DARK else Theme.DARK


@dataclass(frozen=True, slots=True)
class ColorStyle:
    """Text, background and border classes of one color in one theme."""

    text: str
    background: str
    border: str

    @property
    def classes(self) -> tuple[str, ...]:
        """Return the classes in background, border, text order."""

        return (self.background, self.border, self.text)


def _palette(name: str) -> dict[Theme, ColorStyle]:
    return {
        Theme.DARK: ColorStyle(
            text=f"text-{name}-300",
            background=f"bg-{name}-500/20",
            border=f"border-{name}-500/30",
        ),
        Theme.LIGHT: ColorStyle(
            text=f"text-{name}-700",
            background=f"bg-{name}-500/15",
            border=f"border-{name}-400/25",
        ),
    }


THEME_COLORS: Final[Mapping[str, Mapping[Theme, ColorStyle]]] = {
    COLOR_SUCCESS: _palette("sage"),
    COLOR_NEUTRAL: {
        Theme.DARK: ColorStyle("text-slate-400", "bg-slate-500/15", "border-slate-500/25"),
        Theme.LIGHT: ColorStyle("text-slate-600", "bg-slate-500/10", "border-slate-400/20"),
    },
    COLOR_WARNING: _palette("warning"),
    COLOR_PRIMARY_BOLD: {
        Theme.DARK: ColorStyle(
            "text-ember-200 font-bold", "bg-ember-500/30", "border-ember-400/50"
        ),
        Theme.LIGHT: ColorStyle(
            "text-ember-800 font-bold", "bg-ember-500/25", "border-ember-500/40"
        ),
    },
    COLOR_ACCENT: _palette("ember"),
    COLOR_DANGER: _palette("danger"),
    COLOR_INFO: _palette("ocean"),
    COLOR_EMBER: _palette("ember"),
    COLOR_SAGE: _palette("sage"),
    COLOR_OCEAN: _palette("ocean"),
}


def theme_colors(color_class: str | None, theme: Any = DEFAULT_THEME) -> ColorStyle:
    """Return the style of ``color_class`` in ``theme``, defaulting to neutral."""

    palette = THEME_COLORS.get(color_class or COLOR_NEUTRAL) or THEME_COLORS[COLOR_NEUTRAL]
    return palette[normalise_theme(theme)]


def theme_classes(color_class: str | None, theme: Any = DEFAULT_THEME) -> tuple[str, ...]:
    """Return the class names of ``color_class`` in ``theme``."""

    classes: list[str] = []
    for item in theme_colors(color_class, theme).classes:
        classes.extend(item.split())
    return tuple(classes)


def render_classes(
    presentation: ResolvedPresentation, theme: Any = DEFAULT_THEME
) -> tuple[str, ...]:
    """Return the final class list: theme colors, size, then extras."""

    return (*theme_classes(presentation.color_class, theme), *presentation.classes)
