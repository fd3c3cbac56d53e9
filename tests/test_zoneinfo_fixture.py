"""
End-to-end contract test against a captured /proc/zoneinfo

Node 0 with DMA, DMA32, Normal, Movable and Device zones; only the DMA
block carries the per-node stats section.
"""

from pathlib import Path

from zonestat.model import NodeStats, ZoneStats
from zonestat.parse import parse_zoneinfo

FIXTURE = Path(__file__).parent / "fixtures" / "zoneinfo"


def _empty_zone(name: str) -> ZoneStats:
    return ZoneStats(
        node="0",
        zone=name,
        free=0,
        min=0,
        low=0,
        high=0,
        spanned=0,
        present=0,
        managed=0,
        protection=[0, 0, 0, 0, 0],
    )


EXPECTED_NODES = [
    NodeStats(
        node="0",
        nr_inactive_anon=230981,
        nr_active_anon=547580,
        nr_inactive_file=316904,
        nr_active_file=346282,
        nr_unevictable=115467,
        nr_slab_reclaimable=131220,
        nr_slab_unreclaimable=47320,
        nr_isolated_anon=0,
        nr_isolated_file=0,
        workingset_refault=466886,
        workingset_activate=276925,
        workingset_nodereclaim=487,
        nr_anon_pages=795576,
        nr_mapped=215483,
        nr_file_pages=761874,
        nr_dirty=908,
        nr_writeback=0,
        nr_writeback_temp=0,
        nr_shmem=224925,
        nr_shmem_hugepages=0,
        nr_shmem_pmdmapped=0,
        nr_anon_transparent_hugepages=0,
        nr_unstable=0,
        nr_vmscan_write=12950,
        nr_vmscan_immediate_reclaim=3033,
        nr_dirtied=8007423,
        nr_written=7752121,
    )
]

EXPECTED_ZONES = [
    ZoneStats(
        node="0",
        zone="DMA",
        free=3952,
        min=33,
        low=41,
        high=49,
        spanned=4095,
        present=3975,
        managed=3956,
        nr_inactive_anon=0,
        nr_active_anon=0,
        nr_inactive_file=0,
        nr_active_file=0,
        nr_unevictable=0,
        nr_write_pending=0,
        nr_mlock=0,
        nr_page_table_pages=0,
        nr_kernel_stack=0,
        nr_bounce=0,
        nr_zspages=0,
        nr_free_cma=0,
        numa_hit=1,
        numa_miss=0,
        numa_foreign=0,
        numa_interleave=0,
        numa_local=1,
        numa_other=0,
        protection=[0, 2877, 7826, 7826, 7826],
    ),
    ZoneStats(
        node="0",
        zone="DMA32",
        free=204252,
        min=19510,
        low=21059,
        high=22608,
        spanned=1044480,
        present=759231,
        managed=742806,
        nr_inactive_anon=118558,
        nr_active_anon=106598,
        nr_inactive_file=75475,
        nr_active_file=70293,
        nr_unevictable=66195,
        nr_write_pending=64,
        nr_mlock=4,
        nr_page_table_pages=1756,
        nr_kernel_stack=2208,
        nr_bounce=0,
        nr_zspages=0,
        nr_free_cma=0,
        numa_hit=113952967,
        numa_miss=0,
        numa_foreign=0,
        numa_interleave=0,
        numa_local=113952967,
        numa_other=0,
        protection=[0, 0, 4949, 4949, 4949],
    ),
    ZoneStats(
        node="0",
        zone="Normal",
        free=18553,
        min=11176,
        low=13842,
        high=16508,
        spanned=1308160,
        present=1308160,
        managed=1268711,
        nr_inactive_anon=112423,
        nr_active_anon=440982,
        nr_inactive_file=241429,
        nr_active_file=275989,
        nr_unevictable=49272,
        nr_write_pending=844,
        nr_mlock=154,
        nr_page_table_pages=9750,
        nr_kernel_stack=15136,
        nr_bounce=0,
        nr_zspages=0,
        nr_free_cma=0,
        numa_hit=162718019,
        numa_miss=0,
        numa_foreign=0,
        numa_interleave=26812,
        numa_local=162718019,
        numa_other=0,
        protection=[0, 0, 0, 0, 0],
    ),
    _empty_zone("Movable"),
    _empty_zone("Device"),
]


def test_fixture_record_counts() -> None:
    """
    One NodeStats (DMA block only) and one ZoneStats per block
    """
    snapshot = parse_zoneinfo(FIXTURE.read_bytes())

    assert len(snapshot.nodes) == 1
    assert [zone.zone for zone in snapshot.zones] == ["DMA", "DMA32", "Normal", "Movable", "Device"]


def test_fixture_full_contents() -> None:
    """
    Every field matches the captured file; unreported fields stay None
    """
    snapshot = parse_zoneinfo(FIXTURE.read_bytes())

    assert snapshot.nodes == EXPECTED_NODES
    assert snapshot.zones == EXPECTED_ZONES
    # "scanned" was dropped from newer kernels and is absent here
    assert all(zone.scanned is None for zone in snapshot.zones)
