"""Translation helpers for presentation labels."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .const import DEFAULT_LOCALE

LABEL_TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "mode_semi_automatic": "semi-automatic",
        "mode_automatic": "automatic",
        "mode_manual": "manual",
        "mode_subtitle": "Control mode",
        "return_to_auto": "Return to automatic: {when}",
        "suffix_offline": "Offline",
        "suffix_critical_battery": "Critical battery",
        "suffix_low_battery": "Low battery",
        "stove_loading": "LOADING...",
        "stove_work": "RUNNING",
        "stove_off": "OFF",
        "stove_start": "STARTING",
        "stove_standby": "STANDBY",
        "stove_error": "ERROR",
        "stove_clean": "CLEANING",
        "stove_modulation": "MODULATING",
    },
    "it": {
        "mode_semi_automatic": "Semi-manuale",
        "mode_automatic": "Automatica",
        "mode_manual": "Manuale",
        "mode_subtitle": "Modalità controllo",
        "return_to_auto": "Ritorno automatico: {when}",
        "suffix_offline": "Offline",
        "suffix_critical_battery": "Critica",
        "suffix_low_battery": "Bassa",
        "stove_loading": "CARICAMENTO...",
        "stove_work": "IN FUNZIONE",
        "stove_off": "SPENTA",
        "stove_start": "AVVIO IN CORSO",
        "stove_standby": "IN ATTESA",
        "stove_error": "ERRORE",
        "stove_clean": "PULIZIA",
        "stove_modulation": "MODULAZIONE",
    },
}


def normalise_locale(locale: Any) -> str:
    """Return the supported language code for ``locale``."""

    if not isinstance(locale, str):
        return DEFAULT_LOCALE
    language = locale.replace("_", "-").split("-", 1)[0].strip().lower()
    if language in LABEL_TRANSLATIONS:
        return language
    return DEFAULT_LOCALE


def get_labels(locale: Any = DEFAULT_LOCALE) -> Mapping[str, str]:
    """Return the label templates for ``locale``."""

    return LABEL_TRANSLATIONS[normalise_locale(locale)]


def translate(key: str, locale: Any = DEFAULT_LOCALE, **placeholders: Any) -> str:
    """Return the formatted label for ``key``.

    Missing keys fall back to the default locale and finally to ``key``
    itself; templates with unknown placeholders are returned unformatted.
    """

    template = get_labels(locale).get(key)
    if template is None:
        template = LABEL_TRANSLATIONS[DEFAULT_LOCALE].get(key)
    if template is None:
        return key
    try:
        return template.format(**placeholders)
    except (KeyError, ValueError):
        return template


__all__ = [
    "LABEL_TRANSLATIONS",
    "get_labels",
    "normalise_locale",
    "translate",
]
