"""Tests for the display model behind the built-in loading screen."""

import pytest

from loading_orchestrator.client.loading_state import LoadingScreenState
from loading_orchestrator.client.orchestrator import LoadingOrchestrator
from loading_orchestrator.core.interfaces import LoadingScreen
from loading_orchestrator.core.step import LoadingStep


def test_state_implements_loading_screen_capability():
    assert isinstance(LoadingScreenState(), LoadingScreen)


def test_update_stores_progress_and_formatted_status():
    state = LoadingScreenState(format_status=lambda s: f"{s['phase']} ({s['item']})")

    state.update_loading_state(0.42, {"phase": "Textures", "item": "flags.png"})

    assert state.progress == 0.42
    assert state.status_text == "Textures (flags.png)"
    assert state.percent_text == "42%"
    assert state.update_count == 1


def test_default_status_formatting_uses_str():
    state = LoadingScreenState()

    state.update_loading_state(0.0, 3)

    assert state.status_text == "3"


def test_show_error_falls_back_to_exception_name():
    state = LoadingScreenState()

    state.show_error(TimeoutError())
    assert state.error_text == "TimeoutError"

    state.show_error(RuntimeError("disk full"))
    assert state.error_text == "disk full"


def test_finalize_pins_full_progress():
    state = LoadingScreenState()
    state.update_loading_state(0.7, "almost")

    state.finalize("Finalizing Graphics...")

    assert state.progress == 1.0
    assert state.status_text == "Finalizing Graphics..."


@pytest.mark.asyncio
async def test_state_as_screen_tracks_sequence(host):
    orchestrator = LoadingOrchestrator(host)
    state = LoadingScreenState()

    async def noop():
        return None

    steps = [LoadingStep.from_action(1.0, "Generating world", noop)]

    await orchestrator.execute_steps_with_loading_screen(state, steps)

    assert state.progress == 1.0
    assert state.status_text == "Generating world"
    assert state.update_count == 2
