"""
zonestat.collect
AUTHOR: carter-vin

Read outcome wrapper for the CLI
- ZoneinfoReadError / ZoneinfoParseError become data (event + exit code)
- anything else is a bug and propagates with its traceback
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from zonestat.errors import ZoneinfoError
from zonestat.model import Zoneinfo


@dataclass(frozen=True)
class ReadOutcome:
    """
    Result of one zoneinfo read
    - snapshot: parsed Zoneinfo when ok
    - error_type/error_message/error_path: set when the read failed
    """

    ok: bool
    snapshot: Optional[Zoneinfo] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None
    error_path: Optional[str] = None


def collect_zoneinfo(
    read: Callable[[Union[str, Path]], Zoneinfo],
    target: Union[str, Path],
) -> ReadOutcome:
    """
    Run one read, keeping documented zoneinfo failures as data
    """
    try:
        snapshot = read(target)
    except ZoneinfoError as e:
        return ReadOutcome(
            ok=False,
            error_type=type(e).__name__,
            error_message=str(e),
            error_path=str(e.path) if e.path is not None else None,
        )
    return ReadOutcome(ok=True, snapshot=snapshot)
