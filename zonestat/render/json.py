"""
zonestat.render.json
AUTHOR: carter-vin

JSON renderer wrapper
"""

from __future__ import annotations

from zonestat.model import report_to_json
from zonestat.render.base import Renderer


class JsonRenderer(Renderer):
    name = "json"

    def render(self, report) -> str:
        return report_to_json(report)
