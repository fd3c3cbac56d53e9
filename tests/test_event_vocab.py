"""
Contract test for event vocabulary enforcement.

The logging surface must reject unknown event types to keep aggregation stable.
"""

import json

import pytest

from zonestat.logging import emit_event


def test_emit_event_rejects_invalid_event_type() -> None:
    """
    Unknown event types must raise ValueError.
    """
    with pytest.raises(ValueError, match="invalid event_type"):
        emit_event("not_a_real_event", agent_version="0.1.0")


def test_events_go_to_stderr_as_one_json_line(capsys) -> None:
    """
    Events keep stdout free for snapshots
    """
    emit_event(
        "zoneinfo_read",
        agent_version="0.1.0",
        mode="oneshot",
        path="/proc/zoneinfo",
        zones=5,
        node_stats=1,
    )

    captured = capsys.readouterr()
    assert captured.out == ""

    payload = json.loads(captured.err.strip())
    assert payload["event_type"] == "zoneinfo_read"
    assert payload["agent_version"] == "0.1.0"
    assert "utc_now" in payload
    assert payload["zones"] == 5


def test_long_messages_are_truncated(capsys) -> None:
    """
    message fields are capped to keep events compact
    """
    emit_event(
        "zoneinfo_read_failed",
        agent_version="0.1.0",
        message="x" * 500,
    )

    payload = json.loads(capsys.readouterr().err.strip())
    assert payload["message"].startswith("x" * 200)
    assert payload["message"].endswith("...[truncated 300 chars]")
