"""
zonestat.render.base
AUTHOR: carter-vin

Renderer interface
"""

from __future__ import annotations

from zonestat.model import ZoneinfoReport


class Renderer:
    name: str = "base"

    def render(self, report: ZoneinfoReport) -> str:
        raise NotImplementedError
