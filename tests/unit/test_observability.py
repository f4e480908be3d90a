"""Tests for the observability module."""

import json
from unittest.mock import patch

from freezegun import freeze_time

from observability import (
    NavigationEvent,
    Timer,
    emit_event,
    generate_request_id,
    should_sample,
)


class TestGenerateRequestId:
    def test_generates_hex_string(self):
        request_id = generate_request_id()
        assert len(request_id) == 16  # 8 bytes = 16 hex chars
        int(request_id, 16)

    def test_generates_unique_ids(self):
        ids = [generate_request_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestNavigationEvent:
    @freeze_time("2026-01-01 12:00:00")
    def test_creates_event_with_defaults(self):
        event = NavigationEvent(path="/backup")

        assert event.event_type == "navigation"
        assert event.path == "/backup"
        assert event.timestamp == "2026-01-01T12:00:00Z"
        assert event.outcome == "dispatched"
        assert len(event.request_id) == 16

    def test_preserves_custom_request_id(self):
        event = NavigationEvent(request_id="custom123456789a")
        assert event.request_id == "custom123456789a"


class TestShouldSample:
    def test_always_keeps_errors(self):
        assert should_sample({"outcome": "error"}, sample_rate=0.0)

    def test_always_keeps_reroutes_and_not_found(self):
        assert should_sample({"outcome": "rerouted"}, sample_rate=0.0)
        assert should_sample({"outcome": "not_found"}, sample_rate=0.0)

    def test_always_keeps_slow_navigations(self):
        assert should_sample({"outcome": "dispatched", "wall_time_ms": 1500}, sample_rate=0.0)

    def test_always_keeps_debug_paths(self):
        event = {"outcome": "dispatched", "path": "/login"}
        assert should_sample(event, debug_paths=["/login"], sample_rate=0.0)

    def test_samples_fast_dispatches(self):
        event = {"outcome": "dispatched", "wall_time_ms": 3}
        with patch("observability.random.random", return_value=0.05):
            assert should_sample(event, sample_rate=0.10)
        with patch("observability.random.random", return_value=0.5):
            assert not should_sample(event, sample_rate=0.10)


class TestEmitEvent:
    def test_emits_json_line(self, capsys):
        emitted = emit_event(NavigationEvent(path="/login", outcome="rerouted"))

        assert emitted is True
        data = json.loads(capsys.readouterr().out)
        assert data["path"] == "/login"
        assert data["event_type"] == "navigation"

    def test_dropped_by_sampling(self, capsys):
        emitted = emit_event({"outcome": "dispatched"}, sample_rate=0.0)

        assert emitted is False
        assert capsys.readouterr().out == ""

    def test_force(self, capsys):
        assert emit_event({"outcome": "dispatched"}, sample_rate=0.0, force=True)
        assert json.loads(capsys.readouterr().out) == {"outcome": "dispatched"}


class TestTimer:
    def test_measures_elapsed(self):
        with Timer() as timer:
            running = timer.elapsed()

        assert running >= 0
        assert timer.elapsed() == timer.elapsed_ms
        assert timer.elapsed_ms >= running
