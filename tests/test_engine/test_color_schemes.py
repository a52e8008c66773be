"""Tests for the color scheme table."""

from __future__ import annotations

import re

import pytest

from kumiko.engine.color_schemes import (
    COLOR_SCHEMES,
    get_color_scheme,
    get_color_scheme_names,
    normalize_scheme_key,
)
from kumiko.errors import KumikoError, UnknownColorSchemeError

HEX_COLOR = re.compile(r"^#[0-9a-f]{6}$")


def test_default_scheme_first():
    assert COLOR_SCHEMES[0].name == "Default"
    assert COLOR_SCHEMES[0].background == "#2d2d2d"


def test_palettes_are_eight_hex_colors():
    for scheme in COLOR_SCHEMES:
        assert len(scheme.palette) == 8, scheme.name
        assert all(HEX_COLOR.match(c) for c in scheme.palette), scheme.name
        assert len(scheme.line_colors) == 7


def test_names_and_keys_unique():
    names = get_color_scheme_names()
    assert len(names) == len(set(names))
    keys = [scheme.key for scheme in COLOR_SCHEMES]
    assert len(keys) == len(set(keys))


@pytest.mark.parametrize("name", ["Dracula", "Nord", "Catppuccin Mocha", "TokyoNight Storm"])
def test_well_known_schemes_present(name):
    assert name in get_color_scheme_names()


def test_normalize_scheme_key():
    assert normalize_scheme_key("Rose Pine_Moon") == "rose-pine-moon"
    assert normalize_scheme_key("  TokyoNight   Storm ") == "tokyonight-storm"
    assert normalize_scheme_key("nord") == "nord"


def test_lookup_ignores_case_and_separators():
    expected = get_color_scheme("Catppuccin Mocha")
    assert get_color_scheme("catppuccin-mocha") is expected
    assert get_color_scheme("CATPPUCCIN_MOCHA") is expected


def test_unknown_scheme():
    with pytest.raises(UnknownColorSchemeError, match='Unknown color scheme: "nonexistent-scheme"') as exc:
        get_color_scheme("nonexistent-scheme")
    assert exc.value.name == "nonexistent-scheme"
    assert isinstance(exc.value, KumikoError)
    assert isinstance(exc.value, ValueError)
