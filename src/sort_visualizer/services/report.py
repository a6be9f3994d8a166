"""Algorithm comparison report.

Runs algorithms headlessly (no pacing, no rendering) on copies of the same
values and tabulates the totals the live metrics panel would have shown.
"""

import logging
from collections.abc import Iterable, Sequence

import pandas as pd

from sort_visualizer.core.algorithms import ALGORITHMS, build_steps
from sort_visualizer.core.constants import ALGORITHM_INFO, ColumnNames
from sort_visualizer.core.driver import StepDriver
from sort_visualizer.core.elements import SortArray
from sort_visualizer.core.errors import UnknownAlgorithm
from sort_visualizer.schemas import AlgorithmReport
from sort_visualizer.services.metrics import MetricsTracker

logger = logging.getLogger(__name__)


def run_headless(algorithm: str, values: Iterable[int]) -> AlgorithmReport:
    """Sort a copy of `values` with `algorithm` and report its totals."""
    if algorithm not in ALGORITHMS:
        raise UnknownAlgorithm(algorithm)
    array = SortArray(values)
    tracker = MetricsTracker(algorithm)
    driver = StepDriver(array, tracker)
    driver.drain(build_steps(algorithm, array))

    time_complexity, space_complexity = tracker.complexity
    return AlgorithmReport(
        algorithm=algorithm,
        title=ALGORITHM_INFO[algorithm].title,
        size=len(array),
        comparisons=tracker.comparisons,
        exchanges=tracker.exchanges,
        exchange_label=tracker.exchange_label,
        frames=driver.frames,
        time_complexity=time_complexity,
        space_complexity=space_complexity,
        is_sorted=array.is_sorted(),
    )


def compare_algorithms(
    values: Sequence[int], algorithms: Iterable[str] | None = None
) -> pd.DataFrame:
    """Run each algorithm on the same values.

    Args:
        values: Values to sort; each algorithm gets its own copy.
        algorithms: Keys to include, all registered algorithms by default.

    Returns:
        DataFrame with one row per algorithm, columns from `ColumnNames`.
    """
    keys = list(ALGORITHMS) if algorithms is None else list(algorithms)
    rows = [run_headless(key, values).model_dump() for key in keys]
    logger.info(f"Compared {len(keys)} algorithms on {len(values)} values")

    columns = [
        ColumnNames.ALGORITHM,
        ColumnNames.TITLE,
        ColumnNames.SIZE,
        ColumnNames.COMPARISONS,
        ColumnNames.EXCHANGES,
        ColumnNames.EXCHANGE_LABEL,
        ColumnNames.FRAMES,
        ColumnNames.TIME_COMPLEXITY,
        ColumnNames.SPACE_COMPLEXITY,
        ColumnNames.IS_SORTED,
    ]
    return pd.DataFrame(rows, columns=columns)
