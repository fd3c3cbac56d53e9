"""
zonestat.emit

AUTHOR: carter-vin

OUTPUT:
- stdout (rendered snapshot)
- optional JSON Lines spool file, one report per line, append-only

Design goals:
- Create spool directory if missing
- Flush per write so tail/ingest can see updates immediately
- Explicit error surfaces (do not silently drop data)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class EmitTargets:
    """
    Emission destination configuration
    - spool_path: None disables the spool
    - spool_max_bytes: None disables rotation
    """

    spool_path: Path | None = None
    emit_stdout: bool = True
    spool_max_bytes: int | None = None
    spool_rotate_count: int = 3


def _rotation_path(spool_path: Path, index: int) -> Path:
    """
    Build rotation path with numeric suffix
    """
    return spool_path.with_name(f"{spool_path.stem}.{index}{spool_path.suffix}")


def maybe_rotate_spool(targets: EmitTargets) -> dict[str, Any] | None:
    """
    Rotate spool file when it exceeds max size

    Returns rotation info when a rotation happened
    """
    spool_path = targets.spool_path
    if spool_path is None:
        return None

    if targets.spool_max_bytes is None or targets.spool_max_bytes <= 0:
        return None

    if targets.spool_rotate_count < 1:
        return None

    if not spool_path.exists():
        return None

    prior_size = spool_path.stat().st_size
    if prior_size < targets.spool_max_bytes:
        return None

    # Rotate oldest first to keep shifts deterministic
    for index in range(targets.spool_rotate_count, 1, -1):
        src = _rotation_path(spool_path, index - 1)
        dst = _rotation_path(spool_path, index)
        if dst.exists():
            dst.unlink()
        if src.exists():
            src.rename(dst)

    first = _rotation_path(spool_path, 1)
    if first.exists():
        first.unlink()
    spool_path.rename(first)

    return {"rotated_to": str(first), "prior_size_bytes": prior_size}


def append_jsonl_line(spool_path: Path, line: str) -> None:
    """
    Append a single JSON string as one JSONL line

    Failure semantics:
    - raises on IO errors; caller decides how to handle
    """
    spool_path.parent.mkdir(parents=True, exist_ok=True)

    with spool_path.open(mode="a", encoding="utf-8", newline="\n") as f:
        f.write(line)
        f.write("\n")
        f.flush()


def emit_snapshot(
    rendered: str,
    report_json: str,
    targets: EmitTargets,
    *,
    on_spool_error: Optional[Callable[[Exception, Path], None]] = None,
) -> dict[str, Any] | None:
    """
    Emit one snapshot to configured targets

    rendered:
    - operator-facing output for stdout (any format)
    report_json:
    - single JSON object string for the spool (no trailing newline)
    """
    if targets.emit_stdout:
        print(rendered)

    if targets.spool_path is None:
        return None

    try:
        rotation_info = maybe_rotate_spool(targets)
        append_jsonl_line(targets.spool_path, report_json)
    except Exception as e:
        if on_spool_error is not None:
            on_spool_error(e, targets.spool_path)
        raise

    return rotation_info
