"""
Contract tests for reading zoneinfo from a procfs mount
"""

import shutil
from pathlib import Path

import pytest

from zonestat.errors import ZoneinfoError, ZoneinfoParseError, ZoneinfoReadError
from zonestat.procfs import FS, read_zoneinfo, read_zoneinfo_file

FIXTURE = Path(__file__).parent / "fixtures" / "zoneinfo"


@pytest.fixture
def proc_root(tmp_path: Path) -> Path:
    shutil.copyfile(FIXTURE, tmp_path / "zoneinfo")
    return tmp_path


def test_fs_resolves_paths_under_mount(proc_root: Path) -> None:
    """
    FS.path joins under the mount point
    """
    fs = FS(proc_root)

    assert fs.path("zoneinfo") == proc_root / "zoneinfo"


def test_read_zoneinfo_from_mount(proc_root: Path) -> None:
    """
    read_zoneinfo reads <mount>/zoneinfo and parses it
    """
    snapshot = read_zoneinfo(proc_root)

    assert len(snapshot.nodes) == 1
    assert len(snapshot.zones) == 5
    assert snapshot == FS(str(proc_root)).zoneinfo()


def test_each_read_is_independent(proc_root: Path) -> None:
    """
    Nothing is cached between reads
    """
    first = read_zoneinfo(proc_root)
    (proc_root / "zoneinfo").write_text("Node 0, zone   Normal\n  pages free     1\n")
    second = read_zoneinfo(proc_root)

    assert len(first.zones) == 5
    assert [zone.free for zone in second.zones] == [1]
    assert first.zones[0] is not second.zones[0]


def test_missing_mount_point_is_read_error(tmp_path: Path) -> None:
    """
    A missing mount point fails before any read
    """
    missing = tmp_path / "no-proc"

    with pytest.raises(ZoneinfoReadError) as excinfo:
        read_zoneinfo(missing)

    assert excinfo.value.path == missing


def test_missing_zoneinfo_wraps_path_and_cause(tmp_path: Path) -> None:
    """
    I/O failure carries the resolved path and the underlying OSError
    """
    with pytest.raises(ZoneinfoReadError) as excinfo:
        read_zoneinfo(tmp_path)

    err = excinfo.value
    assert isinstance(err, ZoneinfoError)
    assert err.path == tmp_path / "zoneinfo"
    assert isinstance(err.__cause__, OSError)
    assert str(err).startswith(f"error reading zoneinfo {tmp_path / 'zoneinfo'}: ")


def test_undecodable_file_is_parse_error_with_path(tmp_path: Path) -> None:
    """
    Parse failures are re-raised with the file path attached
    """
    path = tmp_path / "zoneinfo"
    path.write_bytes(b"Node 0, zone DMA\n\xff\n")

    with pytest.raises(ZoneinfoParseError) as excinfo:
        read_zoneinfo_file(path)

    assert excinfo.value.path == path
    assert str(excinfo.value).startswith(f"error parsing zoneinfo {path}: ")
