"""Configuration schemas for dashboard presentation options."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

import voluptuous as vol

from .const import COLOR_KEYS, COLOR_NEUTRAL, DEFAULT_LOCALE, DEFAULT_THEME, ICON_UNKNOWN
from .errors import TokenTableError
from .i18n import normalise_locale
from .rules import RuleTable, fallback_rule, marker_rule
from .theme import Theme
from .variants import CARD_SURFACES

_LOGGER = logging.getLogger(__name__)

CONF_THEME = "theme"
CONF_LOCALE = "locale"
CONF_CARD_SURFACE = "card_surface"
CONF_STATUS_RULES = "status_rules"
CONF_MARKER = "marker"
CONF_ICON = "icon"
CONF_COLOR = "color"

NonEmptyString = vol.All(str, vol.Strip, vol.Length(min=1))

STATUS_RULE_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_MARKER): vol.All(str, vol.Length(min=1)),
        vol.Required(CONF_ICON): NonEmptyString,
        vol.Required(CONF_COLOR): vol.In(COLOR_KEYS),
    }
)

DASHBOARD_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_THEME, default=DEFAULT_THEME): vol.All(
            str, vol.Lower, vol.In([theme.value for theme in Theme])
        ),
        vol.Optional(CONF_LOCALE, default=DEFAULT_LOCALE): vol.All(
            str, normalise_locale
        ),
        vol.Optional(CONF_CARD_SURFACE, default=CARD_SURFACES.default): vol.In(
            CARD_SURFACES.keys()
        ),
        vol.Optional(CONF_STATUS_RULES, default=list): [STATUS_RULE_SCHEMA],
    }
)


def validate_dashboard_options(raw: Mapping[str, Any] | None) -> dict[str, Any]:
    """Validate dashboard options, raising ``TokenTableError`` when invalid."""

    try:
        return DASHBOARD_SCHEMA(dict(raw or {}))
    except vol.Invalid as err:
        _LOGGER.error("Invalid dashboard options: %s", err)
        raise TokenTableError(f"Invalid dashboard options: {err}") from err


def build_status_rule_tables(
    rules: list[Mapping[str, Any]],
) -> tuple[RuleTable[str], RuleTable[str]]:
    """Return custom icon and color rule tables from configured rules.

    Rules keep their configured order and are closed by the unknown-status
    fallback; absent statuses resolve to the unknown icon and neutral color.
    """

    try:
        validated = [STATUS_RULE_SCHEMA(dict(rule)) for rule in rules]
    except (vol.Invalid, TypeError, ValueError) as err:
        raise TokenTableError(f"Invalid status rule: {err}") from err

    icon_table = RuleTable(
        "custom_status_icon",
        [
            *(marker_rule(rule[CONF_MARKER], rule[CONF_ICON]) for rule in validated),
            fallback_rule(ICON_UNKNOWN),
        ],
        no_status=ICON_UNKNOWN,
    )
    color_table = RuleTable(
        "custom_status_color",
        [
            *(marker_rule(rule[CONF_MARKER], rule[CONF_COLOR]) for rule in validated),
            fallback_rule(COLOR_NEUTRAL),
        ],
        no_status=COLOR_NEUTRAL,
    )
    return icon_table, color_table
