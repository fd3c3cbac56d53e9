"""
zonestat.model
AUTHOR: carter-vin

Zoneinfo records + report envelope + deterministic serialization

Design goals:
- Every counter is Optional[int]: None means "kernel did not report it",
  which is not the same as a reported 0
- Explicit kernel key mapping (no accidental serialization via __dict__)
- Versioned report envelope ("schema_version" = "1")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

import json

# Schema constants
SCHEMA_VERSION = "1"

# attribute -> /proc/zoneinfo key, zone section
ZONE_FIELD_KEYS: dict[str, str] = {
    "free": "free",
    "min": "min",
    "low": "low",
    "high": "high",
    "scanned": "scanned",
    "spanned": "spanned",
    "present": "present",
    "managed": "managed",
    "nr_inactive_anon": "nr_zone_inactive_anon",
    "nr_active_anon": "nr_zone_active_anon",
    "nr_inactive_file": "nr_zone_inactive_file",
    "nr_active_file": "nr_zone_active_file",
    "nr_unevictable": "nr_zone_unevictable",
    "nr_write_pending": "nr_zone_write_pending",
    "nr_mlock": "nr_mlock",
    "nr_page_table_pages": "nr_page_table_pages",
    "nr_kernel_stack": "nr_kernel_stack",
    "nr_bounce": "nr_bounce",
    "nr_zspages": "nr_zspages",
    "nr_free_cma": "nr_free_cma",
    "numa_hit": "numa_hit",
    "numa_miss": "numa_miss",
    "numa_foreign": "numa_foreign",
    "numa_interleave": "numa_interleave",
    "numa_local": "numa_local",
    "numa_other": "numa_other",
}

# Node section keys match attribute names one to one
NODE_FIELD_KEYS: tuple[str, ...] = (
    "nr_inactive_anon",
    "nr_active_anon",
    "nr_inactive_file",
    "nr_active_file",
    "nr_unevictable",
    "nr_slab_reclaimable",
    "nr_slab_unreclaimable",
    "nr_isolated_anon",
    "nr_isolated_file",
    "workingset_refault",
    "workingset_activate",
    "workingset_nodereclaim",
    "nr_anon_pages",
    "nr_mapped",
    "nr_file_pages",
    "nr_dirty",
    "nr_writeback",
    "nr_writeback_temp",
    "nr_shmem",
    "nr_shmem_hugepages",
    "nr_shmem_pmdmapped",
    "nr_anon_transparent_hugepages",
    "nr_unstable",
    "nr_vmscan_write",
    "nr_vmscan_immediate_reclaim",
    "nr_dirtied",
    "nr_written",
)


# Records
@dataclass
class ZoneStats:
    """
    One (NUMA node, memory zone) block of /proc/zoneinfo
    - node: node id as printed by the kernel ("0", "1", ...)
    - zone: zone name ("DMA", "DMA32", "Normal", ...)
    - protection: one entry per value on the protection line, or None
    """

    node: str
    zone: str

    # watermarks
    free: Optional[int] = None
    min: Optional[int] = None
    low: Optional[int] = None
    high: Optional[int] = None

    # sizing
    scanned: Optional[int] = None
    spanned: Optional[int] = None
    present: Optional[int] = None
    managed: Optional[int] = None

    # per-zone LRU / accounting
    nr_inactive_anon: Optional[int] = None
    nr_active_anon: Optional[int] = None
    nr_inactive_file: Optional[int] = None
    nr_active_file: Optional[int] = None
    nr_unevictable: Optional[int] = None
    nr_write_pending: Optional[int] = None
    nr_mlock: Optional[int] = None
    nr_page_table_pages: Optional[int] = None
    nr_kernel_stack: Optional[int] = None
    nr_bounce: Optional[int] = None
    nr_zspages: Optional[int] = None
    nr_free_cma: Optional[int] = None

    # NUMA locality
    numa_hit: Optional[int] = None
    numa_miss: Optional[int] = None
    numa_foreign: Optional[int] = None
    numa_interleave: Optional[int] = None
    numa_local: Optional[int] = None
    numa_other: Optional[int] = None

    protection: Optional[list[Optional[int]]] = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"node": self.node, "zone": self.zone}
        for attr, key in ZONE_FIELD_KEYS.items():
            payload[key] = getattr(self, attr)
        payload["protection"] = None if self.protection is None else list(self.protection)
        return payload


@dataclass
class NodeStats:
    """
    The "per-node stats" sub-section found inside a zone block
    """

    node: str

    nr_inactive_anon: Optional[int] = None
    nr_active_anon: Optional[int] = None
    nr_inactive_file: Optional[int] = None
    nr_active_file: Optional[int] = None
    nr_unevictable: Optional[int] = None
    nr_slab_reclaimable: Optional[int] = None
    nr_slab_unreclaimable: Optional[int] = None
    nr_isolated_anon: Optional[int] = None
    nr_isolated_file: Optional[int] = None
    workingset_refault: Optional[int] = None
    workingset_activate: Optional[int] = None
    workingset_nodereclaim: Optional[int] = None
    nr_anon_pages: Optional[int] = None
    nr_mapped: Optional[int] = None
    nr_file_pages: Optional[int] = None
    nr_dirty: Optional[int] = None
    nr_writeback: Optional[int] = None
    nr_writeback_temp: Optional[int] = None
    nr_shmem: Optional[int] = None
    nr_shmem_hugepages: Optional[int] = None
    nr_shmem_pmdmapped: Optional[int] = None
    nr_anon_transparent_hugepages: Optional[int] = None
    nr_unstable: Optional[int] = None
    nr_vmscan_write: Optional[int] = None
    nr_vmscan_immediate_reclaim: Optional[int] = None
    nr_dirtied: Optional[int] = None
    nr_written: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"node": self.node}
        for key in NODE_FIELD_KEYS:
            payload[key] = getattr(self, key)
        return payload


@dataclass
class Zoneinfo:
    """
    Parsed /proc/zoneinfo snapshot

    Both lists keep block order. Nodes are not de-duplicated: the kernel may
    repeat per-node stats for every zone block of a node
    """

    nodes: list[NodeStats] = field(default_factory=list)
    zones: list[ZoneStats] = field(default_factory=list)

    def zones_for_node(self, node: str) -> list[ZoneStats]:
        return [zone for zone in self.zones if zone.node == node]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "zones": [zone.to_dict() for zone in self.zones],
        }


# Envelope
@dataclass(frozen=True)
class Source:
    """
    Where and when the snapshot was read
    - path: file the snapshot came from
    - read_at: timestamp (UTC, ISO 8601)
    """

    path: str
    read_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "read_at": self.read_at,
        }


@dataclass(frozen=True)
class Meta:
    """
    Metadata for versioning & traceability
    - schema_version: envelope schema version -> used for validate compatibility
    - agent_version: zonestat version string
    """

    schema_version: str
    agent_version: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "agent_version": self.agent_version,
        }


@dataclass(frozen=True)
class ZoneinfoReport:
    """
    Top-level report around one snapshot
    """

    source: Source
    snapshot: Zoneinfo
    meta: Meta

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source.to_dict(),
            "snapshot": self.snapshot.to_dict(),
            "meta": self.meta.to_dict(),
        }


def utc_now_iso() -> str:
    """
    Current time in ISO 8601 (UTC)
    """
    return datetime.now(timezone.utc).isoformat()


def build_report(
    snapshot: Zoneinfo,
    *,
    path: str,
    agent_version: str,
    read_at: str | None = None,
) -> ZoneinfoReport:
    """
    Wrap a snapshot into a validated report
    """
    report = ZoneinfoReport(
        source=Source(path=path, read_at=read_at or utc_now_iso()),
        snapshot=snapshot,
        meta=Meta(schema_version=SCHEMA_VERSION, agent_version=agent_version),
    )

    # validate before returning
    validate_report(report)
    return report


def validate_report(report: ZoneinfoReport) -> None:
    """
    Validate report structure

    Raises ValueError on invalid
    """
    if not report.source.path:
        raise ValueError("source.path is empty")
    if not report.source.read_at:
        raise ValueError("source.read_at is empty")

    if report.meta.schema_version != SCHEMA_VERSION:
        raise ValueError(f"meta.schema_version must be: '{SCHEMA_VERSION}'")
    if not report.meta.agent_version:
        raise ValueError("meta.agent_version must be non-empty")

    for zone in report.snapshot.zones:
        if not zone.node or not zone.zone:
            raise ValueError("zone record missing node or zone identity")
    for node in report.snapshot.nodes:
        if not node.node:
            raise ValueError("node record missing node identity")


def report_to_json(report: ZoneinfoReport) -> str:
    """
    Serialize a ZoneinfoReport

    Rules:
    - sort_keys=True ensures stable key order
    - separators remove whitespace to avoid formatting drift
    """
    return json.dumps(
        report.to_dict(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
