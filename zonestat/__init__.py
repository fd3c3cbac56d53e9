"""zonestat package exports."""

__version__ = "0.1.0"

from zonestat.errors import ZoneinfoError, ZoneinfoParseError, ZoneinfoReadError
from zonestat.model import NodeStats, Zoneinfo, ZoneStats
from zonestat.parse import parse_zoneinfo
from zonestat.procfs import FS, read_zoneinfo, read_zoneinfo_file

__all__ = [
    "FS",
    "NodeStats",
    "ZoneStats",
    "Zoneinfo",
    "ZoneinfoError",
    "ZoneinfoParseError",
    "ZoneinfoReadError",
    "parse_zoneinfo",
    "read_zoneinfo",
    "read_zoneinfo_file",
]
