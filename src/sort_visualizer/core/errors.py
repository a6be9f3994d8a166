"""Exceptions raised by the visualizer core.

Cancellation (pause/reset during a run) is not an error and has no exception
here: the step driver reports it as `RunOutcome.ABORTED`.
"""


class SortVisualizerError(Exception):
    """Base class for rejected visualizer operations."""


class AlreadyRunning(SortVisualizerError):
    """A run is live; the requested operation needs an idle session."""


class InvalidSize(SortVisualizerError, ValueError):
    """Requested array size is out of range."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Invalid array size: {size}")
        self.size = size


class EmptyOrInvalidInput(SortVisualizerError, ValueError):
    """Custom array input contained no positive integers."""


class UnknownAlgorithm(SortVisualizerError, KeyError):
    """Algorithm key is not one of the registered algorithms."""

    def __str__(self) -> str:
        return f"Unknown algorithm: {self.args[0]!r}"


class UnknownVisualMode(SortVisualizerError, KeyError):
    """Visual mode key is not one of the known render modes."""

    def __str__(self) -> str:
        return f"Unknown visual mode: {self.args[0]!r}"
