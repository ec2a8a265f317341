import dataclasses

import pytest

from calendar_theme import DARK_THEME, LIGHT_THEME, ThemeMode, resolve_theme


def test_resolve_theme_picks_one_of_two_constants():
    assert resolve_theme(True) is DARK_THEME
    assert resolve_theme(False) is LIGHT_THEME
    assert resolve_theme(True) is resolve_theme(True)


def test_theme_colours():
    assert LIGHT_THEME.day_color == "#222"
    assert LIGHT_THEME.annotation_color == "inherit"
    assert DARK_THEME.header_color == "#a0a0b8"


def test_themes_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        LIGHT_THEME.day_color = "red"


def test_theme_mode_toggle():
    assert ThemeMode.from_flag(False) is ThemeMode.LIGHT
    assert ThemeMode.LIGHT.toggled() is ThemeMode.DARK
    assert ThemeMode.DARK.toggled().toggled() is ThemeMode.DARK
    assert ThemeMode.DARK.theme is DARK_THEME
    assert {mode.theme for mode in ThemeMode} == {LIGHT_THEME, DARK_THEME}
