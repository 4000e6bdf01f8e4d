"""Variant and size lookup tables with declared defaults."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
import logging
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .errors import TokenTableError

_LOGGER = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
B = TypeVar("B")


@dataclass(frozen=True, slots=True)
class TokenBundle:
    """Style classes plus boolean marker attributes for one variant."""

    classes: tuple[str, ...] = ()
    markers: frozenset[str] = field(default_factory=frozenset)

    @property
    def class_name(self) -> str:
        """Return the classes joined into a single class string."""

        return " ".join(self.classes)

    def has_marker(self, marker: str) -> bool:
        """Return ``True`` when the bundle carries ``marker``."""

        return marker in self.markers


def bundle(*classes: str, markers: Iterable[str] = ()) -> TokenBundle:
    """Return a ``TokenBundle`` built from ``classes``."""

    return TokenBundle(classes=tuple(classes), markers=frozenset(markers))


class VariantTable(Generic[K, B]):
    """Closed key to bundle mapping with a required default entry."""

    __slots__ = ("_default", "_entries", "_name")

    def __init__(self, name: str, entries: Mapping[K, B], *, default: K) -> None:
        """Build the table; the default key must be one of the entries."""

        if default not in entries:
            raise TokenTableError(
                f"Variant table {name!r} is missing its default entry {default!r}"
            )
        self._name = name
        self._entries: Mapping[K, B] = MappingProxyType(dict(entries))
        self._default = default

    @property
    def name(self) -> str:
        """Return the table name."""

        return self._name

    @property
    def default(self) -> K:
        """Return the declared default key."""

        return self._default

    @property
    def default_bundle(self) -> B:
        """Return the bundle of the declared default key."""

        return self._entries[self._default]

    def normalise_key(self, key: Any) -> K:
        """Return ``key`` when known, else the declared default key."""

        # bool keys would otherwise alias the 0/1 entries
        try:
            if key is not None and not isinstance(key, bool) and key in self._entries:
                return key
        except TypeError:
            pass
        if key is not None:
            _LOGGER.debug(
                "Unknown key %r for variant table %s; using %r",
                key,
                self._name,
                self._default,
            )
        return self._default

    def resolve(self, key: Any) -> B:
        """Return the bundle for ``key`` or the default bundle."""

        return self._entries[self.normalise_key(key)]

    def keys(self) -> tuple[K, ...]:
        """Return the table keys in declaration order."""

        return tuple(self._entries)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, bool):
            return False
        try:
            return key in self._entries
        except TypeError:
            return False

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"VariantTable({self._name!r}, default={self._default!r})"


def resolve_variant(key: Any, table: VariantTable[K, B]) -> B:
    """Resolve ``key`` against ``table``."""

    return table.resolve(key)


# --- Card surfaces -----------------------------------------------------------

CARD_SURFACE_ORDER: tuple[str, ...] = ("solid", "glass", "liquid", "liquid-enhanced")
LIQUID_MARKER = "liquid"

_CARD_BASE = ("rounded-2xl", "border", "bg-slate-900")
_CARD_GLASS = (*_CARD_BASE, "bg-opacity-70", "backdrop-blur-xl")
_CARD_LIQUID = (*_CARD_GLASS, "liquid-sheen")
_CARD_LIQUID_ENHANCED = (*_CARD_LIQUID, "liquid-glow", "shadow-liquid-lg")

CARD_SURFACES: VariantTable[str, TokenBundle] = VariantTable(
    "card_surface",
    {
        "solid": bundle(*_CARD_BASE),
        "glass": bundle(*_CARD_GLASS),
        "liquid": bundle(*_CARD_LIQUID, markers=(LIQUID_MARKER,)),
        "liquid-enhanced": bundle(*_CARD_LIQUID_ENHANCED, markers=(LIQUID_MARKER,)),
    },
    default="solid",
)


def card_surface_intensity(surface: Any) -> int:
    """Return the visual intensity rank of a card surface (0 for solid)."""

    return CARD_SURFACE_ORDER.index(CARD_SURFACES.normalise_key(surface))


# --- Headings ----------------------------------------------------------------

HEADING_LEVEL_SIZES: VariantTable[int, str] = VariantTable(
    "heading_level_size",
    {1: "3xl", 2: "2xl", 3: "xl", 4: "lg", 5: "md", 6: "sm"},
    default=2,
)

HEADING_SIZES: VariantTable[str, TokenBundle] = VariantTable(
    "heading_size",
    {
        "sm": bundle("text-sm"),
        "md": bundle("text-base"),
        "lg": bundle("text-lg"),
        "xl": bundle("text-xl"),
        "2xl": bundle("text-2xl"),
        "3xl": bundle("text-3xl"),
    },
    default="2xl",
)

HEADING_VARIANTS: VariantTable[str, TokenBundle] = VariantTable(
    "heading_variant",
    {
        "default": bundle("text-slate-100"),
        "gradient": bundle(
            "bg-gradient-to-r", "from-ember-400", "to-flame-500", "bg-clip-text",
            "text-transparent",
        ),
        "subtle": bundle("text-slate-400"),
        "ember": bundle("text-ember-400"),
        "ocean": bundle("text-ocean-300"),
        "sage": bundle("text-sage-400"),
        "warning": bundle("text-warning-400"),
        "danger": bundle("text-danger-400"),
        "info": bundle("text-ocean-300"),
    },
    default="default",
)

# --- Dividers ----------------------------------------------------------------

DIVIDER_ORIENTATIONS: VariantTable[str, TokenBundle] = VariantTable(
    "divider_orientation",
    {
        "horizontal": bundle("w-full", "h-px"),
        "vertical": bundle("h-full", "w-px"),
    },
    default="horizontal",
)

DIVIDER_SPACING: VariantTable[str, TokenBundle] = VariantTable(
    "divider_spacing",
    {
        "none": bundle("my-0"),
        "sm": bundle("my-2"),
        "md": bundle("my-4"),
        "lg": bundle("my-8"),
    },
    default="md",
)

DIVIDER_VERTICAL_SPACING: VariantTable[str, TokenBundle] = VariantTable(
    "divider_vertical_spacing",
    {
        "none": bundle("mx-0"),
        "sm": bundle("mx-2"),
        "md": bundle("mx-4"),
        "lg": bundle("mx-8"),
    },
    default="md",
)

DIVIDER_VARIANTS: VariantTable[str, TokenBundle] = VariantTable(
    "divider_variant",
    {
        "solid": bundle("bg-slate-700"),
        "dashed": bundle("border-t", "border-dashed", "border-slate-600"),
        "gradient": bundle(
            "bg-gradient-to-r", "from-transparent", "via-slate-600", "to-transparent"
        ),
    },
    default="solid",
)

# --- Labels ------------------------------------------------------------------

LABEL_SIZES: VariantTable[str, TokenBundle] = VariantTable(
    "label_size",
    {
        "sm": bundle("text-xs"),
        "md": bundle("text-sm"),
        "lg": bundle("text-base"),
    },
    default="md",
)

LABEL_VARIANTS: VariantTable[str, TokenBundle] = VariantTable(
    "label_variant",
    {
        "default": bundle("text-slate-300", "font-medium"),
        "muted": bundle("text-slate-500"),
        "ember": bundle("text-ember-400", "font-semibold"),
        "error": bundle("text-danger-400"),
    },
    default="default",
)

# --- Grids -------------------------------------------------------------------

GRID_COLUMNS: VariantTable[int, TokenBundle] = VariantTable(
    "grid_columns",
    {
        1: bundle("grid-cols-1"),
        2: bundle("grid-cols-1", "sm:grid-cols-2"),
        3: bundle("grid-cols-1", "sm:grid-cols-2", "lg:grid-cols-3"),
        4: bundle("grid-cols-1", "sm:grid-cols-2", "lg:grid-cols-3", "xl:grid-cols-4"),
        5: bundle(
            "grid-cols-1", "sm:grid-cols-2", "lg:grid-cols-3", "xl:grid-cols-4",
            "2xl:grid-cols-5",
        ),
        6: bundle(
            "grid-cols-2", "sm:grid-cols-3", "lg:grid-cols-4", "xl:grid-cols-5",
            "2xl:grid-cols-6",
        ),
    },
    default=3,
)

GRID_GAPS: VariantTable[str, TokenBundle] = VariantTable(
    "grid_gap",
    {
        "none": bundle("gap-0"),
        "sm": bundle("gap-3", "sm:gap-4"),
        "md": bundle("gap-4", "sm:gap-5"),
        "lg": bundle("gap-6", "sm:gap-8"),
    },
    default="md",
)

# --- Pagination --------------------------------------------------------------

PAGINATION_STATES: VariantTable[str, TokenBundle] = VariantTable(
    "pagination_state",
    {
        "enabled": bundle("text-slate-200", "hover:bg-slate-700", "cursor-pointer"),
        "current": bundle("bg-ember-500", "text-white", "font-semibold"),
        "disabled": bundle("text-slate-500", "opacity-50", "cursor-not-allowed"),
    },
    default="enabled",
)

# --- Status badges -----------------------------------------------------------

STATUS_BADGE_SIZES: VariantTable[str, TokenBundle] = VariantTable(
    "status_badge_size",
    {
        "sm": bundle("text-xs", "px-2.5", "py-1"),
        "md": bundle("text-sm", "px-3", "py-1.5"),
        "lg": bundle("text-base", "px-4", "py-2"),
    },
    default="md",
)

STATUS_BADGE_VARIANTS: VariantTable[str, TokenBundle] = VariantTable(
    "status_badge_variant",
    {
        "badge": bundle("inline-flex", "items-center", "gap-1.5", "rounded-full"),
        "display": bundle("flex", "flex-col", "items-center", "gap-3", "rounded-2xl"),
        "dot": bundle("inline-block", "rounded-full"),
        "floating": bundle("absolute", "z-20"),
    },
    default="badge",
)
