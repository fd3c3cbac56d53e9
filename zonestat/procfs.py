"""
zonestat.procfs
AUTHOR: carter-vin

procfs access
- Linux-first via <mount>/zoneinfo
- mount point is configurable (containers, fixtures, chroots)
- reads once per call, nothing cached
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from zonestat.errors import ZoneinfoParseError, ZoneinfoReadError
from zonestat.model import Zoneinfo
from zonestat.parse import parse_zoneinfo

DEFAULT_MOUNT_POINT = Path("/proc")
ZONEINFO_FILE = "zoneinfo"


def read_zoneinfo_file(path: Union[str, Path]) -> Zoneinfo:
    """
    Read and parse a zoneinfo-formatted file

    Raises:
    - ZoneinfoReadError when the file cannot be read (no parsing attempted)
    - ZoneinfoParseError when its bytes cannot be decoded
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ZoneinfoReadError(str(e), path=path) from e

    try:
        return parse_zoneinfo(data)
    except ZoneinfoParseError as e:
        raise ZoneinfoParseError(e.message, path=path) from e


class FS:
    """
    A procfs mount point
    """

    def __init__(self, mount_point: Union[str, Path] = DEFAULT_MOUNT_POINT) -> None:
        mount = Path(mount_point)
        if not mount.is_dir():
            raise ZoneinfoReadError("procfs mount point not found", path=mount)
        self.mount_point = mount

    def path(self, *parts: str) -> Path:
        return self.mount_point.joinpath(*parts)

    def zoneinfo(self) -> Zoneinfo:
        return read_zoneinfo_file(self.path(ZONEINFO_FILE))


def read_zoneinfo(mount_point: Union[str, Path] = DEFAULT_MOUNT_POINT) -> Zoneinfo:
    """
    Read and parse zone info from the procfs mounted at mount_point
    """
    return FS(mount_point).zoneinfo()
