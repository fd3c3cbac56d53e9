"""
zonestat.values
AUTHOR: carter-vin

Numeric token coercion for procfs values
- single token -> optional int64 (bad text is "absent", never an error)
- token list -> list of int64, strict (caller decides what a failure means)

Accepted syntax is an optional sign followed by ASCII digits only; padding,
"_" separators and non-ASCII digits are malformed
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_int64(token: str) -> int:
    if not isinstance(token, str) or _INT_RE.fullmatch(token) is None:
        raise ValueError(f"not a base-10 integer: {token!r}")
    value = int(token, 10)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"value out of int64 range: {token!r}")
    return value


def parse_int64(token: str) -> Optional[int]:
    """
    Parse a base-10 int64 token, None if malformed or out of range
    """
    try:
        return _to_int64(token)
    except ValueError:
        return None


def parse_int64s(tokens: Iterable[str]) -> list[Optional[int]]:
    """
    Parse every token as int64

    Raises ValueError on the first malformed token; the returned list
    always has one entry per input token
    """
    values: list[Optional[int]] = []
    for token in tokens:
        try:
            values.append(_to_int64(token))
        except ValueError as e:
            raise ValueError(f"invalid int64 token: {token!r}") from e
    return values
