from __future__ import annotations

import json
import runpy

import pytest
from typer.testing import CliRunner

from bootlog import cli

runner = CliRunner()


def _write_events(path, *events) -> None:
    path.write_text("\n".join(json.dumps(event) for event in events) + "\n", encoding="utf-8")


def test_replay_writes_json_lines(tmp_path):
    events = tmp_path / "events.jsonl"
    _write_events(
        events,
        {"event": "OnStartExecuting", "function_name": "hook.onStart", "caller_name": "bytes.NewBuffer"},
        {"event": "Stopping", "signal": "SIGINT"},
        {"event": "Provided", "err": "some error"},
    )

    result = runner.invoke(cli.app, ["replay", str(events)])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        '{"level":"info","callee":"hook.onStart","caller":"bytes.NewBuffer","message":"OnStart hook executing"}',
        '{"level":"info","signal":"INTERRUPT","message":"received signal"}',
        '{"level":"error","error":"some error","module":"","message":"error encountered while applying options"}',
    ]


def test_replay_min_level_filters_records(tmp_path):
    events = tmp_path / "events.jsonl"
    _write_events(events, {"event": "Started"}, {"event": "Stopped", "err": "boom"})

    result = runner.invoke(cli.app, ["replay", str(events), "--min-level", "error"])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ['{"level":"error","error":"boom","message":"stop failed"}']


def test_replay_logging_format_uses_config(tmp_path):
    events = tmp_path / "events.jsonl"
    _write_events(events, {"event": "Started"})
    config = tmp_path / "sink.json"
    config.write_text(json.dumps({"format": "logging", "logger_name": "bootlog.test.cli"}))

    result = runner.invoke(cli.app, ["replay", str(events), "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ['{"level":"info","message":"started"}']


def test_replay_reports_decode_errors(tmp_path):
    events = tmp_path / "events.jsonl"
    _write_events(events, {"event": "Started"}, {"event": "Exploded"})

    result = runner.invoke(cli.app, ["replay", str(events)])

    assert result.exit_code == 1
    assert "line 2: unknown event 'Exploded'" in result.output


def test_replay_rejects_unknown_format(tmp_path):
    events = tmp_path / "events.jsonl"
    _write_events(events, {"event": "Started"})

    result = runner.invoke(cli.app, ["replay", str(events), "--format", "xml"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_variants_lists_event_names():
    result = runner.invoke(cli.app, ["variants"])

    assert result.exit_code == 0
    names = result.stdout.splitlines()
    assert names[0] == "OnStartExecuting"
    assert "RolledBack" in names


def test_module_entrypoint_calls_cli_main(monkeypatch):
    called = {"value": False}

    def fake_main(prog_name=None):
        called["value"] = True
        called["prog_name"] = prog_name

    monkeypatch.setattr(cli, "main", fake_main)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("bootlog.__main__", run_name="__main__")

    assert called["value"]
    assert called["prog_name"] == "bootlog"
    assert exc_info.value.code == 0


def test_replay_reports_undecodable_events_file(tmp_path):
    events = tmp_path / "events.jsonl"
    events.write_bytes(b'{"event": "Started"}\n\xff\xfe\n')

    result = runner.invoke(cli.app, ["replay", str(events)])

    assert result.exit_code == 1
    assert "invalid text encoding" in result.output


def test_replay_reports_out_of_range_runtime(tmp_path):
    events = tmp_path / "events.jsonl"
    _write_events(events, {"event": "OnStopExecuted", "runtime": 1e20})

    result = runner.invoke(cli.app, ["replay", str(events)])

    assert result.exit_code == 1
    assert "line 1: invalid 'runtime'" in result.output


@pytest.mark.parametrize(
    ("filename", "content"),
    [
        ("sink.json", "{not json"),
        ("sink.yaml", "format: [json\n"),
    ],
)
def test_replay_reports_malformed_config(tmp_path, filename, content):
    events = tmp_path / "events.jsonl"
    _write_events(events, {"event": "Started"})
    config = tmp_path / filename
    config.write_text(content)

    result = runner.invoke(cli.app, ["replay", str(events), "--config", str(config)])

    assert result.exit_code == 1
    assert "Error: Invalid" in result.output
