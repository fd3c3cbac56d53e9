"""
zonestat.render.table
AUTHOR: carter-vin

Compact watermark table, one row per zone
"""

from __future__ import annotations

from zonestat.render.base import Renderer
from zonestat.render.utils import format_count


class TableRenderer(Renderer):
    name = "table"

    def render(self, report) -> str:
        headers = [
            "NODE",
            "ZONE",
            "FREE",
            "MIN",
            "LOW",
            "HIGH",
            "MANAGED",
        ]

        rows = [headers]
        for zone in report.snapshot.zones:
            rows.append(
                [
                    zone.node,
                    zone.zone,
                    format_count(zone.free),
                    format_count(zone.min),
                    format_count(zone.low),
                    format_count(zone.high),
                    format_count(zone.managed),
                ]
            )

        widths = [max(len(row[i]) for row in rows) for i in range(len(headers))]
        lines: list[str] = []

        for row in rows:
            padded = [row[i].ljust(widths[i]) for i in range(len(headers))]
            lines.append("  ".join(padded).rstrip())

        return "\n".join(lines)
