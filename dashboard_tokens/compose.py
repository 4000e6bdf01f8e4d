"""Resolved presentation records and caller override composition."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

_LOGGER = logging.getLogger(__name__)

TOKEN_FIELDS: tuple[str, ...] = ("icon", "color_class", "label", "size_class")


@dataclass(frozen=True, slots=True)
class ResolvedPresentation:
    """Final tokens handed to the renderer."""

    icon: str | None = None
    color_class: str = ""
    label: str = ""
    size_class: str = ""
    extra_classes: tuple[str, ...] = ()

    @property
    def classes(self) -> tuple[str, ...]:
        """Return the size classes followed by the extra classes."""

        return (*self.size_class.split(), *self.extra_classes)

    @property
    def class_name(self) -> str:
        """Return :attr:`classes` joined into one class string."""

        return " ".join(self.classes)


class PresentationOverrides(BaseModel):
    """Explicit per-token overrides supplied by a caller.

    Unknown fields are ignored and ``None`` means "not supplied".
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    icon: str | None = None
    color_class: str | None = Field(default=None, alias="colorClass")
    label: str | None = None
    size_class: str | None = Field(default=None, alias="sizeClass")

    def supplied(self) -> dict[str, str]:
        """Return the token fields that were supplied."""

        return {
            name: value
            for name in TOKEN_FIELDS
            if (value := getattr(self, name)) is not None
        }


_FIELD_NAMES: dict[str, str] = {name: name for name in TOKEN_FIELDS}
_FIELD_NAMES.update(
    {
        info.alias: name
        for name, info in PresentationOverrides.model_fields.items()
        if info.alias
    }
)


def coerce_overrides(raw: Any) -> PresentationOverrides:
    """Return ``raw`` as ``PresentationOverrides``, dropping invalid fields."""

    if raw is None:
        return PresentationOverrides()
    if isinstance(raw, PresentationOverrides):
        return raw
    if not isinstance(raw, Mapping):
        _LOGGER.debug("Ignoring non-mapping presentation overrides: %r", raw)
        return PresentationOverrides()

    payload = {key: value for key, value in raw.items() if key in _FIELD_NAMES}
    try:
        return PresentationOverrides.model_validate(payload)
    except ValidationError as err:
        invalid = {
            _FIELD_NAMES.get(str(error["loc"][0]), str(error["loc"][0]))
            for error in err.errors()
            if error.get("loc")
        }
        _LOGGER.debug("Dropping invalid presentation overrides: %s", sorted(invalid))

    cleaned = {
        key: value
        for key, value in payload.items()
        if _FIELD_NAMES[key] not in invalid
    }
    try:
        return PresentationOverrides.model_validate(cleaned)
    except ValidationError:
        return PresentationOverrides()


def normalise_classes(extra: Any) -> tuple[str, ...]:
    """Return caller extra classes as a tuple of class names."""

    if extra is None:
        return ()
    if isinstance(extra, str):
        return tuple(extra.split())
    if not isinstance(extra, Iterable):
        return ()
    classes: list[str] = []
    for item in extra:
        if isinstance(item, str):
            classes.extend(item.split())
    return tuple(classes)


def compose(
    resolved: ResolvedPresentation,
    overrides: PresentationOverrides | Mapping[str, Any] | None = None,
    extra_classes: Iterable[str] | str | None = None,
) -> ResolvedPresentation:
    """Apply overrides and append extra classes to ``resolved``.

    A supplied override replaces its field whole.  Extra classes are always
    appended after the existing ones, so base styling is never dropped.
    """

    changes: dict[str, Any] = dict(coerce_overrides(overrides).supplied())
    extra = normalise_classes(extra_classes)
    if extra:
        changes["extra_classes"] = (*resolved.extra_classes, *extra)
    if not changes:
        return resolved
    return replace(resolved, **changes)
