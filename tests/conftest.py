"""Shared test fixtures."""

from typing import Callable

import pytest

from sort_visualizer.core.control import RunController
from sort_visualizer.core.elements import SortArray
from sort_visualizer.schemas import VisualizerConfig
from sort_visualizer.services.session import VisualizerSession

from .factories import FakeClock, create_array, create_config, create_session


@pytest.fixture
def config_factory() -> Callable[..., VisualizerConfig]:
    """Fixture that returns the config factory function."""
    return create_config


@pytest.fixture
def array_factory() -> Callable[..., SortArray]:
    """Fixture that returns the array factory function."""
    return create_array


@pytest.fixture
def session_factory() -> Callable[..., VisualizerSession]:
    """Fixture that returns the session factory function."""
    return create_session


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(clock: FakeClock) -> RunController:
    """Return an idle run controller on a fake clock."""
    return RunController(clock=clock)
