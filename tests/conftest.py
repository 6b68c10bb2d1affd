"""Pytest fixtures for loading_orchestrator tests."""

from __future__ import annotations

import pytest

from fakes import RecordingHost, RecordingScreen


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def screen() -> RecordingScreen:
    return RecordingScreen()
