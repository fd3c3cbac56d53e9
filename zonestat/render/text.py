"""
zonestat.render.text
AUTHOR: carter-vin

Deterministic key: value text, one block per record
"""

from __future__ import annotations

from zonestat.model import NODE_FIELD_KEYS, ZONE_FIELD_KEYS
from zonestat.render.base import Renderer
from zonestat.render.utils import format_count, format_protection


class TextRenderer(Renderer):
    name = "text"

    def render(self, report) -> str:
        snapshot = report.snapshot
        # Header comes first for quick operator scan
        lines: list[str] = [
            f"source: {report.source.path}",
            f"read_at: {report.source.read_at}",
            f"zones: {len(snapshot.zones)}",
            f"node_stats: {len(snapshot.nodes)}",
        ]

        for zone in snapshot.zones:
            lines.append("")
            lines.append(f"node: {zone.node}")
            lines.append(f"zone: {zone.zone}")
            for attr, key in ZONE_FIELD_KEYS.items():
                lines.append(f"{key}: {format_count(getattr(zone, attr))}")
            lines.append(f"protection: {format_protection(zone.protection)}")

        for node in snapshot.nodes:
            lines.append("")
            lines.append(f"node: {node.node}")
            lines.append("per-node stats:")
            for key in NODE_FIELD_KEYS:
                lines.append(f"{key}: {format_count(getattr(node, key))}")

        return "\n".join(lines)
