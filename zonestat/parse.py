"""
zonestat.parse
AUTHOR: carter-vin

/proc/zoneinfo parser

Layout handled:
- blocks start with "Node <n>, zone <name>"
- a block may carry one "per-node stats" sub-section before its zone
  counters; "pages free" marks the return to zone counters
- unknown keys are ignored, bad numbers become None

Kernel docs: https://www.kernel.org/doc/Documentation/sysctl/vm.txt
"""

from __future__ import annotations

import enum
import re
from typing import Optional, Union

from zonestat.errors import ZoneinfoParseError
from zonestat.model import NODE_FIELD_KEYS, ZONE_FIELD_KEYS, NodeStats, Zoneinfo, ZoneStats
from zonestat.values import parse_int64, parse_int64s

# Splitting on "\nNode" eats the word "Node", so the header pattern
# must not require it (the first block still has it)
BLOCK_DELIMITER = "\nNode"
NODE_ZONE_RE = re.compile(r"(\d+), zone\s+(\w+)")

PER_NODE_PREFIX = "per-node stats"
PAGES_FREE_PREFIX = "pages free"

# kernel key -> attribute
_ZONE_KEY_TO_ATTR = {key: attr for attr, key in ZONE_FIELD_KEYS.items() if attr != "free"}
_NODE_KEYS = frozenset(NODE_FIELD_KEYS)


class Mode(enum.Enum):
    ZONE = "zone"
    NODE = "node"


def parse_protection(line: str) -> Optional[list[Optional[int]]]:
    """
    Parse "protection: (0, 2877, 7826)" into [0, 2877, 7826]

    All-or-nothing: one bad token drops the whole list
    """
    parts = line.split(":")
    if len(parts) < 2:
        return None
    values = parts[1].replace("(", "", 1).replace(")", "", 1).strip()
    try:
        return parse_int64s(values.split(", "))
    except ValueError:
        return None


def parse_zone_line(stats: ZoneStats, line: str) -> None:
    """
    Apply one zone-section line to stats (in place)
    """
    parts = line.split()
    if len(parts) < 2:
        return

    # Two-word label, value is the third token
    if parts[0] == "pages" and parts[1] == "free":
        if len(parts) > 2:
            stats.free = parse_int64(parts[2])
        return

    if parts[0] == "protection:":
        protection = parse_protection(line)
        if protection is not None:
            stats.protection = protection
        return

    attr = _ZONE_KEY_TO_ATTR.get(parts[0])
    if attr is not None:
        setattr(stats, attr, parse_int64(parts[1]))


def parse_node_line(stats: NodeStats, line: str) -> None:
    """
    Apply one per-node stats line to stats (in place)
    """
    parts = line.split()
    if len(parts) < 2:
        return

    if parts[0] in _NODE_KEYS:
        setattr(stats, parts[0], parse_int64(parts[1]))


def parse_header(header: str) -> Optional[tuple[str, str]]:
    """
    Extract (node, zone) from a block header, None if it does not match
    """
    match = NODE_ZONE_RE.search(header)
    if match is None:
        return None
    return match.group(1), match.group(2)


def _decode(data: Union[bytes, str]) -> str:
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ZoneinfoParseError(str(e)) from e


def parse_zoneinfo(data: Union[bytes, str]) -> Zoneinfo:
    """
    Parse the full contents of /proc/zoneinfo

    Blocks with a header that is not "<node>, zone <name>" are skipped
    without producing any record
    """
    zoneinfo = Zoneinfo()

    for block in _decode(data).split(BLOCK_DELIMITER):
        lines = block.split("\n")
        if len(lines) < 2:
            continue
        header, body = lines[0], lines[1:]

        ident = parse_header(header)
        if ident is None:
            continue
        node, zone = ident

        zone_stats = ZoneStats(node=node, zone=zone)
        node_stats: Optional[NodeStats] = None
        mode = Mode.ZONE

        for line in body:
            line = line.strip()

            if line.startswith(PER_NODE_PREFIX):
                mode = Mode.NODE
                node_stats = NodeStats(node=node)
                continue
            if line.startswith(PAGES_FREE_PREFIX):
                mode = Mode.ZONE

            if mode is Mode.NODE:
                parse_node_line(node_stats, line)
            else:
                parse_zone_line(zone_stats, line)

        if node_stats is not None:
            zoneinfo.nodes.append(node_stats)
        zoneinfo.zones.append(zone_stats)

    return zoneinfo
