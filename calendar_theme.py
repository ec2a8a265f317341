"""Light and dark colour roles for the month grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Theme:
    day_color: str
    header_color: str
    annotation_color: str


# "inherit" leaves the annotation in whatever colour the surrounding text uses.
LIGHT_THEME = Theme(day_color="#222", header_color="#555", annotation_color="inherit")
DARK_THEME = Theme(day_color="#f0f0f0", header_color="#a0a0b8", annotation_color="#d0d0e0")


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_flag(cls, dark_mode: bool) -> "ThemeMode":
        return cls.DARK if dark_mode else cls.LIGHT

    @property
    def is_dark(self) -> bool:
        return self is ThemeMode.DARK

    @property
    def theme(self) -> Theme:
        return DARK_THEME if self.is_dark else LIGHT_THEME

    def toggled(self) -> "ThemeMode":
        """Return the other mode, as a theme switch would."""
        return ThemeMode.LIGHT if self.is_dark else ThemeMode.DARK


def resolve_theme(dark_mode: bool) -> Theme:
    """Return DARK_THEME for a truthy flag, LIGHT_THEME otherwise."""
    return ThemeMode.from_flag(dark_mode).theme


__all__ = ["Theme", "ThemeMode", "LIGHT_THEME", "DARK_THEME", "resolve_theme"]
