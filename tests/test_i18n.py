"""Tests for the interface label table and language switching."""

from __future__ import annotations

import pytest

from jorge.utils.i18n import (
    LABELS,
    SUPPORTED_LANGUAGES,
    is_supported_language,
    label,
    toggle_language,
)


@pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
def test_every_label_is_translated(language):
    for key in LABELS:
        assert label(key, language).strip()


def test_unknown_label_is_a_configuration_error():
    with pytest.raises(KeyError):
        label("no_such_label", "eng")


@pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
def test_toggling_twice_restores_language(language):
    assert toggle_language(language) != language
    assert toggle_language(toggle_language(language)) == language


def test_toggle_leaves_unsupported_language_alone():
    assert toggle_language("deu") == "deu"
    assert toggle_language(None) is None


@pytest.mark.parametrize("value", ["deu", "", None, "ENG", "pl"])
def test_unsupported_languages_are_rejected(value):
    assert is_supported_language(value) is False
