"""Ordered rule tables mapping status tokens to presentation tokens."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
import logging
from typing import Generic, TypeVar

from .errors import TokenTableError

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[str], bool]


def contains(marker: str) -> Predicate:
    """Return a predicate matching statuses that contain ``marker``."""

    if not marker:
        raise TokenTableError("marker must not be empty")

    def _predicate(status: str) -> bool:
        return marker in status

    return _predicate


def contains_any(*markers: str) -> Predicate:
    """Return a predicate matching statuses containing any of ``markers``."""

    if not markers or not all(markers):
        raise TokenTableError("markers must be non-empty strings")

    def _predicate(status: str) -> bool:
        return any(marker in status for marker in markers)

    return _predicate


def _always(status: str) -> bool:
    return True


@dataclass(frozen=True, slots=True)
class Rule(Generic[T]):
    """A predicate paired with the token it yields when satisfied."""

    predicate: Predicate
    result: T
    marker: str | None = None
    fallback: bool = False

    def matches(self, status: str) -> bool:
        """Return ``True`` when the rule applies to ``status``."""

        return bool(self.predicate(status))


def marker_rule(marker: str | Iterable[str], result: T) -> Rule[T]:
    """Return a rule matching statuses containing ``marker``.

    ``marker`` may be a single string or several strings; in the latter case
    the rule matches when any of them is contained in the status.
    """

    if isinstance(marker, str):
        return Rule(contains(marker), result, marker=marker)
    markers = tuple(marker)
    return Rule(contains_any(*markers), result, marker="|".join(markers))


def fallback_rule(result: T) -> Rule[T]:
    """Return the always-matching rule closing a table."""

    return Rule(_always, result, fallback=True)


class RuleTable(Generic[T]):
    """First-match-wins table of rules with a dedicated no-status result.

    Rules are evaluated strictly in declaration order; ordering markers from
    specific to general is the table author's responsibility.  Exactly one
    fallback rule must exist and it must be the last one.  An absent or empty
    status never reaches the marker rules and resolves to ``no_status``.
    """

    __slots__ = ("_name", "_no_status", "_rules")

    def __init__(self, name: str, rules: Iterable[Rule[T]], *, no_status: T) -> None:
        """Build the table, validating the fallback invariant."""

        rules_tuple = tuple(rules)
        if not rules_tuple:
            raise TokenTableError(f"Rule table {name!r} has no rules")
        fallback_positions = [
            index for index, rule in enumerate(rules_tuple) if rule.fallback
        ]
        if len(fallback_positions) != 1:
            raise TokenTableError(
                f"Rule table {name!r} must define exactly one fallback rule, "
                f"found {len(fallback_positions)}"
            )
        if fallback_positions[0] != len(rules_tuple) - 1:
            raise TokenTableError(
                f"Fallback rule of table {name!r} must be the last rule"
            )

        self._name = name
        self._rules = rules_tuple
        self._no_status = no_status
        _LOGGER.debug("Built rule table %s with %d rules", name, len(rules_tuple))

    @property
    def name(self) -> str:
        """Return the table name."""

        return self._name

    @property
    def rules(self) -> tuple[Rule[T], ...]:
        """Return the rules in evaluation order."""

        return self._rules

    @property
    def no_status(self) -> T:
        """Return the token used for absent or empty statuses."""

        return self._no_status

    @property
    def fallback(self) -> T:
        """Return the token used for unmatched statuses."""

        return self._rules[-1].result

    @property
    def markers(self) -> tuple[str, ...]:
        """Return the markers of the non-fallback rules in order."""

        return tuple(rule.marker for rule in self._rules if rule.marker)

    def resolve(self, status: str | None) -> T:
        """Return the token of the first rule matching ``status``."""

        if not status:
            return self._no_status
        if not isinstance(status, str):
            status = str(status)
        for rule in self._rules:
            if rule.matches(status):
                return rule.result
        return self.fallback

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({self._name!r}, markers={self.markers!r})"


def resolve(status: str | None, table: RuleTable[T]) -> T:
    """Resolve ``status`` against ``table``."""

    return table.resolve(status)
