"""Step driver: pacing, collaborator isolation and cancellation."""

import asyncio

from sort_visualizer.core.algorithms import build_steps, mark_all_sorted
from sort_visualizer.core.control import RunController
from sort_visualizer.core.driver import RunOutcome, StepDriver
from sort_visualizer.core.elements import SortArray
from sort_visualizer.core.steps import Step, StepKind
from sort_visualizer.services.metrics import MetricsTracker


class SpyArray(SortArray):
    """Counts value mutations."""

    def __init__(self, values):
        super().__init__(values)
        self.mutations = 0

    def exchange(self, i, j):
        self.mutations += 1
        super().exchange(i, j)

    def assign(self, i, element):
        self.mutations += 1
        super().assign(i, element)


class RecordingSleep:
    """Records delays; runs `on_call(n)` on the n-th call before yielding."""

    def __init__(self, on_call=None):
        self.delays: list[float] = []
        self.on_call = on_call

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        if self.on_call is not None:
            self.on_call(len(self.delays))
        await asyncio.sleep(0)


def _driver(array, sleep=None, **kwargs) -> StepDriver:
    return StepDriver(array, MetricsTracker(), sleep=sleep or RecordingSleep(), **kwargs)


def test_run_completes_and_sleeps_once_per_frame() -> None:
    controller = RunController()
    array = SortArray([4, 3, 2, 1])
    sleep = RecordingSleep()
    driver = _driver(array, sleep=sleep, pacing=lambda: 50)

    token = controller.token_for(controller.start())
    outcome = asyncio.run(driver.run(build_steps("bubble", array), token))

    assert outcome is RunOutcome.COMPLETED
    assert array.values() == [1, 2, 3, 4]
    assert len(sleep.delays) == driver.frames
    assert set(sleep.delays) == {0.05}


def test_pause_mid_run_stops_mutation() -> None:
    controller = RunController()
    array = SpyArray(list(range(200, 0, -1)))
    seen = {}

    def pause_at_frame(n):
        if n == 10:
            controller.pause()
            seen["mutations"] = array.mutations
            seen["values"] = array.values()

    driver = _driver(array, sleep=RecordingSleep(pause_at_frame))
    steps = build_steps("quick", array)
    token = controller.token_for(controller.start())

    outcome = asyncio.run(driver.run(steps, token))

    assert outcome is RunOutcome.ABORTED
    assert array.mutations == seen["mutations"]
    assert array.values() == seen["values"]
    # the generator, including its recursive frames, is closed
    assert steps.gi_frame is None


def test_reset_mid_run_abandons_old_token() -> None:
    controller = RunController()
    array = SpyArray([9, 8, 7, 6, 5, 4, 3, 2, 1])
    seen = {}

    def reset_at_frame(n):
        if n == 3:
            controller.reset()
            seen["mutations"] = array.mutations

    driver = _driver(array, sleep=RecordingSleep(reset_at_frame))
    token = controller.token_for(controller.start())

    assert asyncio.run(driver.run(build_steps("merge", array), token)) is RunOutcome.ABORTED
    assert array.mutations == seen["mutations"]
    assert len(array) == 9


def test_cancelled_before_first_step_never_resumes() -> None:
    controller = RunController()
    array = SpyArray([2, 1])
    token = controller.token_for(controller.start())
    controller.cancel()

    outcome = asyncio.run(_driver(array).run(build_steps("bubble", array), token))

    assert outcome is RunOutcome.ABORTED
    assert array.mutations == 0


def test_collaborator_failures_are_swallowed() -> None:
    def broken_render(elements):
        raise RuntimeError("canvas gone")

    def broken_tone(freq):
        raise OSError("no audio device")

    array = SortArray([3, 1, 2])
    driver = StepDriver(array, MetricsTracker(), render=broken_render, play_tone=broken_tone)

    assert driver.drain(build_steps("heap", array)) is RunOutcome.COMPLETED
    assert array.values() == [1, 2, 3]


def test_tones_follow_steps() -> None:
    tones = []
    array = SortArray([2, 1])
    driver = StepDriver(array, MetricsTracker(), play_tone=tones.append)
    driver.drain(build_steps("bubble", array))
    assert tones == [200 + 1]


def test_pacing_is_read_at_every_frame() -> None:
    controller = RunController()
    array = SortArray(list(range(30, 0, -1)))
    speed = {"ms": 200}

    def speed_up(n):
        if n == 5:
            speed["ms"] = 10

    sleep = RecordingSleep(speed_up)
    driver = _driver(array, sleep=sleep, pacing=lambda: speed["ms"])
    token = controller.token_for(controller.start())
    asyncio.run(driver.run(build_steps("selection", array), token))

    assert sleep.delays[:5] == [0.2] * 5
    assert set(sleep.delays[5:]) == {0.01}


def test_step_delay_override_and_notify_only_steps() -> None:
    controller = RunController()
    array = SortArray([1, 2, 3, 4])
    sleep = RecordingSleep()
    driver = _driver(array, sleep=sleep, pacing=lambda: 100)
    token = controller.token_for(controller.start())

    asyncio.run(driver.run(mark_all_sorted(array), token))

    # slots 0 and 3 render with the 30 ms override, then the closing frame
    assert sleep.delays == [0.03, 0.03, 0.0]


def test_drain_honours_token() -> None:
    controller = RunController()
    token = controller.token_for(controller.start())
    controller.pause()

    def steps():
        yield Step(StepKind.FRAME)
        raise AssertionError("resumed after cancellation")

    driver = _driver(SortArray([1]))
    assert driver.drain(steps(), token) is RunOutcome.ABORTED


def test_drain_checks_token_before_first_step() -> None:
    controller = RunController()
    array = SpyArray([3, 2, 1])
    token = controller.token_for(controller.start())
    controller.cancel()

    driver = _driver(array)
    assert driver.drain(build_steps("bubble", array), token) is RunOutcome.ABORTED
    assert array.mutations == 0
    assert driver.frames == 0
