"""Tests for the label translation helpers."""

from __future__ import annotations

import pytest

from dashboard_tokens.i18n import LABEL_TRANSLATIONS, normalise_locale, translate


@pytest.mark.parametrize(
    "locale, expected",
    [("en", "en"), ("it", "it"), ("it-IT", "it"), ("IT_it", "it"), ("de", "en"), (None, "en")],
)
def test_normalise_locale(locale, expected) -> None:
    """Regional variants map to their language; unknown locales to English."""

    assert normalise_locale(locale) == expected


def test_locales_share_keys() -> None:
    """Every locale defines the same label keys."""

    assert set(LABEL_TRANSLATIONS["it"]) == set(LABEL_TRANSLATIONS["en"])


def test_translate_formats_placeholders() -> None:
    """Placeholders are filled from keyword arguments."""

    assert translate("return_to_auto", "it", when="10/10 18:30") == (
        "Ritorno automatico: 10/10 18:30"
    )


def test_translate_missing_placeholder_returns_template() -> None:
    """A missing placeholder value leaves the template untouched."""

    assert translate("return_to_auto") == "Return to automatic: {when}"


def test_translate_unknown_key_returns_key() -> None:
    """Unknown label keys are returned as is."""

    assert translate("no_such_label", "it") == "no_such_label"
