"""Color & style helpers on top of click.style.

Decisions:
- Disables automatically when stdout is not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides via TASKS_PRIMARY / TASKS_PENDING / TASKS_DONE
  (environment or .env, loaded by config). A value is a click color name
  ("cyan", "bright_red") or a #RRGGBB hex code; anything else keeps the default.
"""
from __future__ import annotations
import os, sys
from typing import Dict, Tuple, Union

import click

from .config import ENV_PREFIX

Color = Union[str, Tuple[int, int, int]]
Style = Dict[str, object]

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR

_BASE_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
COLOR_NAMES = frozenset(_BASE_NAMES + tuple(f"bright_{n}" for n in _BASE_NAMES))

PRIMARY_DEFAULT = "blue"
PENDING_DEFAULT = "yellow"
DONE_DEFAULT = "green"


def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def parse_color(value: str, default: Color) -> Color:
    """A click color name or an RGB tuple for the given text; default when invalid."""
    value = (value or '').strip().lower()
    if value in COLOR_NAMES:
        return value
    if value.startswith('#') and _is_hex(value):
        return _hex_to_rgb(value)
    return default


def _palette(name: str, default: str) -> Color:
    return parse_color(os.environ.get(f"{ENV_PREFIX}_{name}", ""), default)


PRIMARY = _palette('PRIMARY', PRIMARY_DEFAULT)
PENDING = _palette('PENDING', PENDING_DEFAULT)
DONE = _palette('DONE', DONE_DEFAULT)

BOLD: Style = {"bold": True}
DIM: Style = {"dim": True}

# keyed by Task.completed
STATUS_COLOR: Dict[bool, Style] = {
    False: {"fg": PENDING},
    True: {"fg": DONE},
}

HEADER_COLOR: Style = {"fg": PRIMARY}
ID_COLOR: Style = {"fg": PRIMARY, "bold": True}
EMPTY_COLOR: Style = {"fg": PRIMARY, "dim": True}


def color(text: str, *styles: Style, enabled: bool = _ENABLE) -> str:
    """Apply the merged styles to text; plain text when color is off."""
    if not enabled:
        return text
    merged: Style = {}
    for style in styles:
        merged.update(style)
    return click.style(text, **merged)


__all__ = [
    'color', 'parse_color', 'BOLD', 'DIM', 'STATUS_COLOR', 'HEADER_COLOR', 'ID_COLOR', 'EMPTY_COLOR',
    'PRIMARY', 'PENDING', 'DONE',
]
