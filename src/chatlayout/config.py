"""Theme and layout configuration.

The defaults reproduce the stock look. A JSON theme file (``$CHATLAYOUT_CONFIG``
or ``~/.config/chatlayout/theme.json``) may override any field.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from datetime import tzinfo
from pathlib import Path
from typing import Any

from chatlayout.state import Role
from chatlayout.style import Color, Style

logger = logging.getLogger(__name__)

Ratios = tuple[tuple[int, int], ...]

DEFAULT_PALETTE: tuple[Color, ...] = (
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.GRAY,
)

RoleGlyphs = tuple[tuple[Role, str], ...]

DEFAULT_ROLE_GLYPHS: RoleGlyphs = (
    (Role.ADMIN, "\U0001f451"),
    (Role.MEMBER, "-"),
    (Role.INVITED, "⏳"),
)


class ConfigError(ValueError):
    """Raised when a theme/layout configuration is invalid."""


@dataclass(frozen=True)
class LayoutConfig:
    palette: tuple[Color, ...] = DEFAULT_PALETTE
    time_style: Style = Style(fg=Color.YELLOW)
    pane_style: Style = Style(fg=Color.WHITE)
    present_style: Style = Style(fg=Color.WHITE)
    absent_style: Style = Style(fg=Color.RED)
    highlight_style: Style = Style(fg=Color.BLACK, bg=Color.GRAY)
    role_glyphs: RoleGlyphs = DEFAULT_ROLE_GLYPHS
    divider_label: str = "new messages"
    messages_title: str = "Messages"
    channels_title: str = "Channels"
    input_title: str = "Input"
    ratios_with_members: Ratios = ((1, 4), (5, 8), (1, 8))
    ratios_without_members: Ratios = ((1, 4), (3, 4))
    timezone: tzinfo | None = None

    def glyph(self, role: Role) -> str:
        return dict(DEFAULT_ROLE_GLYPHS + self.role_glyphs)[role]


DEFAULT_CONFIG = LayoutConfig()


# ---------------------------------------------------------------------------
# (De)serialization
# ---------------------------------------------------------------------------


def _color(value: Any) -> Color:
    if not isinstance(value, str):
        raise ConfigError(f"Color must be a string, got {value!r}")
    try:
        return Color.from_name(value)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def _style(data: Any) -> Style:
    if isinstance(data, str):
        return Style(fg=_color(data))
    if not isinstance(data, dict):
        raise ConfigError(f"Style must be a color name or an object, got {data!r}")
    return Style(
        fg=_color(data["fg"]) if data.get("fg") else None,
        bg=_color(data["bg"]) if data.get("bg") else None,
        bold=bool(data.get("bold", False)),
    )


def _style_to_dict(style: Style) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if style.fg is not None:
        out["fg"] = style.fg.name.lower()
    if style.bg is not None:
        out["bg"] = style.bg.name.lower()
    if style.bold:
        out["bold"] = True
    return out


def _ratios(data: Any, count: int) -> Ratios:
    try:
        ratios = tuple((int(num), int(den)) for num, den in data)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Ratios must be [numerator, denominator] pairs: {data!r}") from e
    if len(ratios) != count:
        raise ConfigError(f"Expected {count} ratios, got {len(ratios)}")
    if any(num <= 0 or den <= 0 for num, den in ratios):
        raise ConfigError(f"Ratios must be positive: {data!r}")
    return ratios


_STYLE_KEYS = {
    "timeStyle": "time_style",
    "paneStyle": "pane_style",
    "presentStyle": "present_style",
    "absentStyle": "absent_style",
    "highlightStyle": "highlight_style",
}

_TEXT_KEYS = {
    "dividerLabel": "divider_label",
    "messagesTitle": "messages_title",
    "channelsTitle": "channels_title",
    "inputTitle": "input_title",
}


def config_from_dict(data: dict[str, Any], base: LayoutConfig = DEFAULT_CONFIG) -> LayoutConfig:
    """Build a config from a JSON-compatible dict, layered over *base*."""
    changes: dict[str, Any] = {}

    if "palette" in data:
        if not isinstance(data["palette"], list):
            raise ConfigError(f"Palette must be a list of colors, got {data['palette']!r}")
        palette = tuple(_color(c) for c in data["palette"])
        if not palette:
            raise ConfigError("Palette must contain at least one color")
        changes["palette"] = palette

    for key, attr in _STYLE_KEYS.items():
        if key in data:
            changes[attr] = _style(data[key])

    for key, attr in _TEXT_KEYS.items():
        if key in data:
            changes[attr] = str(data[key])

    if "roleGlyphs" in data:
        glyphs = data["roleGlyphs"]
        if not isinstance(glyphs, dict):
            raise ConfigError(f"roleGlyphs must be an object, got {glyphs!r}")
        merged = dict(base.role_glyphs)
        for name, glyph in glyphs.items():
            if not isinstance(name, str) or not isinstance(glyph, str):
                raise ConfigError(f"Role glyphs must map names to strings: {name!r}: {glyph!r}")
            try:
                merged[Role(name.lower())] = glyph
            except ValueError:
                raise ConfigError(f"Unknown role: {name!r}") from None
        changes["role_glyphs"] = tuple(merged.items())

    if "ratiosWithMembers" in data:
        changes["ratios_with_members"] = _ratios(data["ratiosWithMembers"], 3)
    if "ratiosWithoutMembers" in data:
        changes["ratios_without_members"] = _ratios(data["ratiosWithoutMembers"], 2)

    return replace(base, **changes)


def config_to_dict(config: LayoutConfig) -> dict[str, Any]:
    """Serialize a config to a JSON-compatible dict (timezone excluded)."""
    out: dict[str, Any] = {
        "palette": [c.name.lower() for c in config.palette],
        "roleGlyphs": {role.value: glyph for role, glyph in config.role_glyphs},
        "ratiosWithMembers": [list(r) for r in config.ratios_with_members],
        "ratiosWithoutMembers": [list(r) for r in config.ratios_without_members],
    }
    for key, attr in _STYLE_KEYS.items():
        out[key] = _style_to_dict(getattr(config, attr))
    for key, attr in _TEXT_KEYS.items():
        out[key] = getattr(config, attr)
    return out


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _get_config_path() -> Path:
    env = os.environ.get("CHATLAYOUT_CONFIG")
    if env:
        return Path(env)
    return Path.home() / ".config" / "chatlayout" / "theme.json"


def load_config(path: Path | None = None) -> LayoutConfig:
    """Load the theme file, falling back to the defaults on any problem."""
    config_path = path or _get_config_path()
    if not config_path.exists():
        return DEFAULT_CONFIG
    try:
        data = json.loads(config_path.read_text())
        if not isinstance(data, dict):
            raise ConfigError("Theme file must contain a JSON object")
        return config_from_dict(data)
    except (OSError, json.JSONDecodeError, ConfigError) as e:
        logger.warning("Ignoring theme file %s: %s", config_path, e)
        return DEFAULT_CONFIG
