"""
zonestat.errors
AUTHOR: carter-vin

Error surface for reading /proc/zoneinfo

Only two failure kinds escape the reader:
- ZoneinfoReadError: file could not be opened/read, nothing was parsed
- ZoneinfoParseError: byte stream could not be processed at all

Bad fields and bad blocks never raise; they degrade to "absent"
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ZoneinfoError(Exception):
    """
    Base error for zoneinfo reads
    - path: resolved file path when known
    """

    verb = "handling"

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        self.path = path
        self.message = message
        super().__init__(self._format())

    def _format(self) -> str:
        if self.path is None:
            return f"error {self.verb} zoneinfo: {self.message}"
        return f"error {self.verb} zoneinfo {self.path}: {self.message}"


class ZoneinfoReadError(ZoneinfoError):
    verb = "reading"


class ZoneinfoParseError(ZoneinfoError):
    verb = "parsing"
