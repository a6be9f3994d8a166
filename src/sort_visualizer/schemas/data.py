"""Metrics and run summary schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RunOutcomeKey = Literal["completed", "aborted"]


class MetricsSnapshot(BaseModel):
    """Point-in-time view of the metrics tracker."""

    algorithm: str = Field(..., description="Active algorithm key")
    comparisons: int = Field(0, ge=0, description="Comparisons counted so far")
    exchanges: int = Field(0, ge=0, description="Swaps or shifts counted so far")
    elapsed_ms: int = Field(0, ge=0, description="Time since the run started")
    progress: float = Field(0.0, ge=0, le=1, description="Fraction of work done")
    exchange_label: str = Field("Swaps", description="'Swaps' or 'Shifts'")
    time_complexity: str = Field("", description="Big-O time annotation")
    space_complexity: str = Field("", description="Big-O space annotation")

    model_config = ConfigDict(frozen=True)


class RunSummary(BaseModel):
    """Outcome of one call to `VisualizerSession.start()`."""

    run_id: int = Field(..., description="Run token issued by the controller")
    algorithm: str
    size: int = Field(..., ge=0, description="Number of elements sorted")
    outcome: RunOutcomeKey
    metrics: MetricsSnapshot

    model_config = ConfigDict(frozen=True)


class AlgorithmReport(BaseModel):
    """Totals from a headless run, one row of the comparison report."""

    algorithm: str
    title: str
    size: int
    comparisons: int
    exchanges: int
    exchange_label: str
    frames: int = Field(..., description="Rendered frames the run produced")
    time_complexity: str
    space_complexity: str
    is_sorted: bool

    model_config = ConfigDict(frozen=True)
