# src/observability.py
"""
Wide event logging for navigation.

One comprehensive event per handled path change, with high cardinality
and high dimensionality, instead of many scattered log lines.

Usage:
    event = NavigationEvent(path="/backup")
    # ... populate event fields during dispatch ...
    emit_event(event)
"""

import json
import random
import secrets
import time
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from typing import Any

# Navigations slower than this are always kept (ms)
SLOW_NAVIGATION_MS = 1000


def generate_request_id() -> str:
    """Generate a unique request ID for tracing."""
    return secrets.token_hex(8)


@dataclass
class NavigationEvent:
    """
    Canonical log line for a navigation.

    Emitted once per NavigationController.handle() call.
    """

    # Identifiers (high cardinality)
    event_type: str = field(default="navigation", init=False)
    request_id: str = ""
    timestamp: str = ""

    # Routing
    path: str = ""
    route_name: str | None = None
    handler: str | None = None
    requires_auth: bool | None = None

    # Session
    authenticated: bool = False
    token_present: bool = False
    redirect_present: bool = False

    # Timing
    wall_time_ms: float = 0

    # Outcome
    outcome: str = "dispatched"  # "dispatched" | "rerouted" | "not_found" | "error"
    error_type: str | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        """Set derived fields after initialization."""
        if not self.timestamp:
            self.timestamp = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        if not self.request_id:
            self.request_id = generate_request_id()


def should_sample(
    event: dict[str, Any],
    debug_paths: list[str] | None = None,
    sample_rate: float = 0.10,
) -> bool:
    """
    Tail sampling strategy for busy dashboards.

    Always keep:
    - Errors (100%)
    - Reroutes to login and unmatched paths
    - Slow navigations
    - Specific paths being debugged

    Sample:
    - Successful, fast dispatches (default 10%)

    Args:
        event: The event dict to evaluate
        debug_paths: List of paths to always keep
        sample_rate: Sampling rate for successful fast navigations

    Returns:
        True if this event should be emitted, False to drop
    """
    if event.get("outcome") in ("error", "rerouted", "not_found"):
        return True

    if event.get("wall_time_ms", 0) > SLOW_NAVIGATION_MS:
        return True

    if debug_paths and event.get("path") in debug_paths:
        return True

    return random.random() < sample_rate


def emit_event(
    event: NavigationEvent | dict[str, Any],
    debug_paths: list[str] | None = None,
    sample_rate: float = 0.10,
    force: bool = False,
) -> bool:
    """
    Emit an event with optional tail sampling.

    Args:
        event: The event to emit (dataclass or dict)
        debug_paths: List of paths to always keep
        sample_rate: Sampling rate for successful fast navigations
        force: If True, skip sampling and always emit

    Returns:
        True if event was emitted, False if dropped by sampling
    """
    event_dict = event if isinstance(event, dict) else asdict(event)

    if force or should_sample(event_dict, debug_paths, sample_rate):
        print(json.dumps(event_dict))
        return True
    return False


class Timer:
    """Context manager for timing operations."""

    def __init__(self) -> None:
        self.start_time: float = 0
        self.end_time: float = 0
        self.elapsed_ms: float = 0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end_time = time.perf_counter()
        self.elapsed_ms = (self.end_time - self.start_time) * 1000

    def elapsed(self) -> float:
        """Return elapsed time in milliseconds."""
        if self.end_time:
            return self.elapsed_ms
        return (time.perf_counter() - self.start_time) * 1000
