"""
zonestat.main
------------
AUTHOR: carter-vin

PURPOSE:
- Stable CLI entrypoint around the /proc/zoneinfo parser
- One read per invocation; scheduling repeated reads is the caller's job

Key contract:
- `zonestat --help` shows a Commands section.
- `zonestat oneshot` reads <proc-root>/zoneinfo and prints one snapshot.
- `zonestat parse FILE` does the same for a saved zoneinfo file.
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

import typer

from zonestat import __version__
from zonestat.collect import ReadOutcome, collect_zoneinfo
from zonestat.emit import EmitTargets, emit_snapshot
from zonestat.logging import emit_event
from zonestat.model import build_report, report_to_json
from zonestat.procfs import DEFAULT_MOUNT_POINT, ZONEINFO_FILE, read_zoneinfo, read_zoneinfo_file
from zonestat.render import RENDERER_NAMES, get_renderer

# Explicit multi-command CLI
app = typer.Typer(
    add_completion=False,
    help="zonestat: /proc/zoneinfo snapshots for node-local monitoring",
)

AGENT_VERSION = __version__


@dataclass(frozen=True)
class EnvironmentInfo:
    """
    Snapshot of the runtime environment
    """

    python_version: str
    os: str
    machine: str
    utc_now: str


def collect_environment_info() -> EnvironmentInfo:
    return EnvironmentInfo(
        python_version=sys.version.split()[0],
        os=f"{platform.system()} {platform.release()}",
        machine=platform.machine(),
        utc_now=datetime.now(timezone.utc).isoformat(),
    )


def _check_format(output_format: str) -> None:
    if output_format not in RENDERER_NAMES:
        raise typer.BadParameter(f"--format must be one of: {', '.join(RENDERER_NAMES)}")


def _emit_outcome(
    outcome: ReadOutcome,
    *,
    mode: str,
    source_path: Path,
    output_format: str,
    targets: EmitTargets,
) -> None:
    """
    Turn one read outcome into output + events

    Failure semantics:
    - read/parse failure -> zoneinfo_read_failed event, exit code 1
    - spool failure -> spool_write_failed event, exception propagates
    """
    if not outcome.ok:
        emit_event(
            "zoneinfo_read_failed",
            agent_version=AGENT_VERSION,
            mode=mode,
            path=str(source_path),
            error_type=outcome.error_type,
            error_path=outcome.error_path,
            message=outcome.error_message,
        )
        raise typer.Exit(code=1)

    snapshot = outcome.snapshot
    emit_event(
        "zoneinfo_read",
        agent_version=AGENT_VERSION,
        mode=mode,
        path=str(source_path),
        zones=len(snapshot.zones),
        node_stats=len(snapshot.nodes),
    )

    report = build_report(snapshot, path=str(source_path), agent_version=AGENT_VERSION)
    report_json = report_to_json(report)
    rendered = get_renderer(output_format).render(report)

    def _on_spool_error(e: Exception, path: Path) -> None:
        emit_event(
            "spool_write_failed",
            agent_version=AGENT_VERSION,
            mode=mode,
            spool_path=str(path),
            error_type=type(e).__name__,
            message=str(e),
        )

    rotation_info = emit_snapshot(rendered, report_json, targets, on_spool_error=_on_spool_error)

    if rotation_info is not None:
        emit_event(
            "spool_rotated",
            agent_version=AGENT_VERSION,
            mode=mode,
            spool_path=str(targets.spool_path),
            **rotation_info,
        )

    emit_event(
        "snapshot_emitted",
        agent_version=AGENT_VERSION,
        mode=mode,
        format=output_format,
        spool_path=str(targets.spool_path) if targets.spool_path else None,
        bytes=len(report_json),
    )


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """
    Root command behavior: print a hint when no subcommand is given
    """
    if ctx.invoked_subcommand is None:
        typer.echo("No command provided. Try: zonestat --help")


@app.command()
def version() -> None:
    """
    Print zonestat version & runtime env
    """
    env = collect_environment_info()

    typer.echo(f"zonestat v{AGENT_VERSION}")
    typer.echo(f"python={env.python_version}")
    typer.echo(f"os={env.os}")
    typer.echo(f"machine={env.machine}")
    typer.echo(f"utc_now={env.utc_now}")


@app.command("oneshot")
def oneshot(
    proc_root: str = typer.Option(
        str(DEFAULT_MOUNT_POINT),
        "--proc-root",
        envvar="ZONESTAT_PROC_ROOT",
        help="procfs mount point to read zoneinfo from.",
    ),
    output_format: str = typer.Option(
        "json",
        "--format",
        help="Output format: json, table or text.",
    ),
    spool: str | None = typer.Option(
        None,
        "--spool",
        envvar="ZONESTAT_SPOOL",
        help=(
            "Optional JSONL spool file; one report appended per run. The spool"
            " (and its rotation) is CLI output state, outside the parser, which"
            " keeps nothing between reads."
        ),
    ),
    spool_max_bytes: int | None = typer.Option(
        None,
        "--spool-max-bytes",
        help="Rotate the spool once it reaches this size.",
        min=1,
    ),
    no_stdout: bool = typer.Option(
        False,
        "--no-stdout",
        help="Disable printing the snapshot to stdout.",
    ),
) -> None:
    """
    Read <proc-root>/zoneinfo once, print and/or spool the snapshot
    """
    _check_format(output_format)

    emit_event(
        "agent_start",
        agent_version=AGENT_VERSION,
        mode="oneshot",
        proc_root=proc_root,
    )

    targets = EmitTargets(
        spool_path=Path(spool) if spool else None,
        emit_stdout=not no_stdout,
        spool_max_bytes=spool_max_bytes,
    )

    try:
        outcome = collect_zoneinfo(read_zoneinfo, proc_root)
        _emit_outcome(
            outcome,
            mode="oneshot",
            source_path=Path(proc_root) / ZONEINFO_FILE,
            output_format=output_format,
            targets=targets,
        )
    finally:
        emit_event(
            "agent_shutdown",
            agent_version=AGENT_VERSION,
            mode="oneshot",
        )


@app.command("parse")
def parse(
    path: str = typer.Argument(..., help="Saved zoneinfo file to parse."),
    output_format: str = typer.Option(
        "json",
        "--format",
        help="Output format: json, table or text.",
    ),
) -> None:
    """
    Parse a saved zoneinfo file (fixtures, bug reports, sosreports)
    """
    _check_format(output_format)

    outcome = collect_zoneinfo(read_zoneinfo_file, path)
    _emit_outcome(
        outcome,
        mode="parse",
        source_path=Path(path),
        output_format=output_format,
        targets=EmitTargets(),
    )


if __name__ == "__main__":
    app()
