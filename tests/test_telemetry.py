from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from mtx.runtime import telemetry


@pytest.fixture(autouse=True)
def restore_config():
    previous = telemetry.active_config()
    yield
    telemetry.configure(config=previous)


def test_get_logger_prefixes_namespace() -> None:
    assert telemetry.get_logger("buffer").name == "mtx.buffer"
    assert telemetry.get_logger("mtx.modes").name == "mtx.modes"
    assert telemetry.get_logger().name == "mtx"


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="loud")


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=telemetry.TelemetryConfig(), preset="quiet")


def test_json_log_file_receives_events(tmp_path: Path) -> None:
    log_file = tmp_path / "mtx.log"
    telemetry.configure(
        config=telemetry.TelemetryConfig(
            level="DEBUG", console=False, json_format=True, log_file=str(log_file)
        )
    )

    telemetry.record_event("buffer.saved", data={"path": "a.txt"})
    for handler in logging.getLogger("mtx").handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"].startswith("event::buffer.saved")
    assert record["path"] == "a.txt"


def test_span_logs_failure_and_reraises(caplog: pytest.LogCaptureFixture) -> None:
    telemetry.configure(preset="quiet")

    with caplog.at_level(logging.ERROR, logger="mtx"):
        with pytest.raises(RuntimeError):
            with telemetry.span("buffer::save", component="buffer"):
                raise RuntimeError("disk full")

    assert any("span::fail" in message for message in caplog.messages)


def test_span_handle_collects_metadata(caplog: pytest.LogCaptureFixture) -> None:
    telemetry.configure(config=telemetry.TelemetryConfig(level="DEBUG", console=False))

    with caplog.at_level(logging.DEBUG, logger="mtx"):
        with telemetry.span("keymaps::resolve", component=True) as handle:
            handle.add_metadata("status", "match")

    ends = [r for r in caplog.records if r.getMessage().startswith("span::end")]
    assert ends
    assert ends[-1].data["status"] == "match"
    assert ends[-1].data["component"] == "keymaps::resolve"
