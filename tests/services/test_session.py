"""Session behaviour: runs, pause/reset, rejected operations and collaborators."""

import asyncio

import pytest

from sort_visualizer.core.driver import RunOutcome
from sort_visualizer.core.elements import ElementState
from sort_visualizer.core.errors import (
    AlreadyRunning,
    EmptyOrInvalidInput,
    InvalidSize,
    UnknownAlgorithm,
    UnknownVisualMode,
)

from ..factories import no_wait


async def _advance(frames: int) -> None:
    for _ in range(frames):
        await asyncio.sleep(0)


def test_start_sorts_and_finalizes(session_factory) -> None:
    session = session_factory([5, 3, 8, 1])
    outcome = asyncio.run(session.start())

    assert outcome is RunOutcome.COMPLETED
    assert session.array.values() == [1, 3, 5, 8]
    assert all(s is ElementState.SORTED for s in session.array.states())
    assert not session.is_running
    assert session.last_run.outcome == "completed"
    assert session.last_run.metrics.progress == 1.0
    assert session.last_run.size == 4


@pytest.mark.parametrize("key", ["merge", "quick", "radix", "counting"])
def test_every_algorithm_runs_through_session(session_factory, key) -> None:
    session = session_factory(algorithm=key, array_size=40)
    assert asyncio.run(session.start()) is RunOutcome.COMPLETED
    assert session.array.is_sorted()
    assert session.metrics.exchange_label == ("Shifts" if key == "merge" else "Swaps")


def test_operations_rejected_while_running(session_factory) -> None:
    session = session_factory(array_size=50)

    async def scenario():
        task = asyncio.create_task(session.start())
        await _advance(2)
        assert session.is_running

        with pytest.raises(AlreadyRunning):
            await session.start()
        with pytest.raises(AlreadyRunning):
            session.generate()
        with pytest.raises(AlreadyRunning):
            session.set_custom("1,2,3")
        with pytest.raises(AlreadyRunning):
            session.select_algorithm("quick")

        session.pause()
        return await task

    assert asyncio.run(scenario()) is RunOutcome.ABORTED
    assert len(session.array) == 50


def test_pause_on_large_array_freezes_contents(session_factory) -> None:
    session = session_factory(array_size=1000)

    async def scenario():
        task = asyncio.create_task(session.start())
        await _advance(1)
        session.pause()
        frozen = session.array.values()
        outcome = await task
        return outcome, frozen

    outcome, frozen = asyncio.run(scenario())
    assert outcome is RunOutcome.ABORTED
    assert session.array.values() == frozen
    assert session.is_paused
    assert session.last_run.outcome == "aborted"


def test_resume_after_pause_finishes_and_keeps_metrics(session_factory) -> None:
    session = session_factory(array_size=30)

    async def scenario():
        task = asyncio.create_task(session.start())
        await _advance(20)
        session.pause()
        await task
        paused_comparisons = session.metrics.comparisons
        outcome = await session.start()
        return paused_comparisons, outcome

    paused_comparisons, outcome = asyncio.run(scenario())
    assert paused_comparisons > 0
    assert outcome is RunOutcome.COMPLETED
    assert session.array.is_sorted()
    # counters accumulate across pause/restart of the same array
    assert session.metrics.comparisons > paused_comparisons


def test_reset_mid_run_regenerates_and_silences_old_run(session_factory) -> None:
    session = session_factory(array_size=60)

    async def scenario():
        task = asyncio.create_task(session.start())
        await _advance(10)
        session.reset()
        fresh = session.array.values()
        outcome = await task
        return outcome, fresh

    outcome, fresh = asyncio.run(scenario())
    assert outcome is RunOutcome.ABORTED
    assert len(session.array) == 60
    assert session.array.values() == fresh
    assert session.metrics.comparisons == 0
    assert not session.is_running
    assert not session.is_paused


def test_set_custom_valid(session_factory) -> None:
    session = session_factory()
    session.set_custom(["5", "3", "8", "1"])

    assert session.array.values() == [5, 3, 8, 1]
    assert all(s is ElementState.DEFAULT for s in session.array.states())


def test_set_custom_invalid_leaves_state(session_factory) -> None:
    session = session_factory([4, 2, 9])
    asyncio.run(session.start())
    comparisons = session.metrics.comparisons

    with pytest.raises(EmptyOrInvalidInput):
        session.set_custom(["abc"])

    assert session.array.values() == [2, 4, 9]
    assert session.metrics.comparisons == comparisons


@pytest.mark.parametrize("size", [0, 1001])
def test_generate_rejects_bad_size(session_factory, size) -> None:
    session = session_factory(array_size=10)
    before = session.array.values()
    with pytest.raises(InvalidSize):
        session.generate(size)
    assert session.array.values() == before


def test_generate_resets_metrics_and_renders(session_factory) -> None:
    frames = []
    session = session_factory([3, 2, 1], render=frames.append)
    asyncio.run(session.start())
    frames.clear()

    session.generate(25)

    assert len(session.array) == 25
    assert session.config.array_size == 25
    assert session.metrics.comparisons == 0
    assert len(frames) == 1 and len(frames[0]) == 25


def test_select_algorithm(session_factory) -> None:
    session = session_factory(array_size=15)
    session.select_algorithm("insertion")

    assert session.config.algorithm == "insertion"
    assert session.metrics.exchange_label == "Shifts"
    assert len(session.array) == 15

    with pytest.raises(UnknownAlgorithm):
        session.select_algorithm("bogo")


def test_visual_mode_and_sound_settings(session_factory) -> None:
    tones = []
    session = session_factory([2, 1], play_tone=tones.append)
    session.select_visual_mode("particles")
    assert session.config.visual_mode == "particles"
    with pytest.raises(UnknownVisualMode):
        session.select_visual_mode("hologram")

    session.set_sound(False)
    asyncio.run(session.start())
    assert tones == []

    session.set_sound(True)
    session.set_custom([2, 1])
    asyncio.run(session.start())
    assert tones


def test_speed_change_applies_mid_run(session_factory) -> None:
    delays = []

    async def sleep(seconds):
        delays.append(seconds)
        if len(delays) == 3:
            session.set_speed(4)
        await no_wait(seconds)

    session = session_factory(array_size=20, speed=0, sleep=sleep)
    asyncio.run(session.start())

    assert delays[0] == 0.2
    assert 0.01 in delays


def test_metrics_listener_receives_snapshots(session_factory) -> None:
    snapshots = []
    session = session_factory([3, 1, 2], on_metrics=snapshots.append)
    asyncio.run(session.start())

    assert snapshots
    assert snapshots[-1].progress == 1.0
    assert snapshots[-1].algorithm == "bubble"


def test_reset_after_custom_keeps_element_count(session_factory) -> None:
    session = session_factory([5, 3, 8, 1], array_size=20)
    assert session.config.array_size == 4

    async def scenario():
        task = asyncio.create_task(session.start())
        await _advance(1)
        session.reset()
        return await task

    assert asyncio.run(scenario()) is RunOutcome.ABORTED
    assert len(session.array) == 4


def test_oversized_custom_array_caps_configured_size(session_factory) -> None:
    session = session_factory()
    session.set_custom([7] * 1200)

    assert len(session.array) == 1200
    assert session.config.array_size == 1000


def test_superseded_run_does_not_overwrite_last_run(session_factory) -> None:
    calls = 0
    release = None

    async def sleep(seconds):
        nonlocal calls
        calls += 1
        if calls == 1:
            await release.wait()
        await no_wait(seconds)

    session = session_factory([4, 3, 2, 1], sleep=sleep)

    async def scenario():
        nonlocal release
        release = asyncio.Event()
        old = asyncio.create_task(session.start())
        await _advance(1)
        session.reset()
        newest = await session.start()
        release.set()
        return newest, await old

    newest, old = asyncio.run(scenario())
    assert newest is RunOutcome.COMPLETED
    assert old is RunOutcome.ABORTED
    assert session.last_run.run_id == session.controller.token
    assert session.last_run.outcome == "completed"
