# tests/test_theme.py

from __future__ import annotations

import click

from tasktracker.theme import BOLD, HEADER_COLOR, STATUS_COLOR, color, parse_color


def test_parse_color_accepts_names_and_hex() -> None:
    assert parse_color("Cyan", "blue") == "cyan"
    assert parse_color(" bright_red ", "blue") == "bright_red"
    assert parse_color("#476EAE", "blue") == (0x47, 0x6E, 0xAE)


def test_parse_color_keeps_default_for_bad_values() -> None:
    assert parse_color("", "blue") == "blue"
    assert parse_color("purple", "blue") == "blue"
    assert parse_color("476EAE", "blue") == "blue"
    assert parse_color("#12345G", "blue") == "blue"


def test_color_is_plain_when_disabled() -> None:
    assert color("TASKS", HEADER_COLOR, BOLD, enabled=False) == "TASKS"


def test_color_merges_styles_through_click() -> None:
    styled = color("Done", STATUS_COLOR[True], BOLD, enabled=True)

    assert styled == click.style("Done", fg=STATUS_COLOR[True]["fg"], bold=True)
    assert click.unstyle(styled) == "Done"
