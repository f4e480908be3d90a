"""
Mock objects for testing the navigation controller.

These fakes stand in for the host capabilities (history, view region)
and the network-backed ones (session exchange, certificate check).
"""

from .navigation import (
    FakeExchanger,
    FakeProbe,
    Navigation,
    RaisingCertCheck,
    RaisingExchanger,
    RecordingHistory,
    RecordingViewRegion,
)

__all__ = [
    "FakeExchanger",
    "FakeProbe",
    "Navigation",
    "RaisingCertCheck",
    "RaisingExchanger",
    "RecordingHistory",
    "RecordingViewRegion",
]
