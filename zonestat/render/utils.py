"""
zonestat.render.utils
AUTHOR: carter-vin

Formatting helpers for renderers
"""

from __future__ import annotations


def format_count(value: int | None) -> str:
    if value is None:
        return "n/a"
    return str(value)


def format_protection(values: list[int | None] | None) -> str:
    if values is None:
        return "n/a"
    return "(" + ", ".join(format_count(value) for value in values) + ")"
