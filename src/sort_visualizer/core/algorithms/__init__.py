"""Algorithm engine.

Each algorithm is a generator function taking the shared `SortArray` and
yielding `Step` records at every suspension point.  Algorithms never see the
run controller; the driver decides between steps whether they may continue.

- comparison.py: bubble, selection, insertion
- divide.py: merge, quick, heap
- distribution.py: radix, counting
- finalize.py: the mark-everything-sorted pass
"""

from collections.abc import Callable

from sort_visualizer.core.algorithms.comparison import (
    bubble_sort,
    insertion_sort,
    selection_sort,
)
from sort_visualizer.core.algorithms.distribution import counting_sort, radix_sort
from sort_visualizer.core.algorithms.divide import heap_sort, merge_sort, quick_sort
from sort_visualizer.core.algorithms.finalize import mark_all_sorted
from sort_visualizer.core.elements import SortArray
from sort_visualizer.core.errors import UnknownAlgorithm
from sort_visualizer.core.steps import StepStream

ALGORITHMS: dict[str, Callable[[SortArray], StepStream]] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
    "radix": radix_sort,
    "counting": counting_sort,
}


def build_steps(key: str, array: SortArray) -> StepStream:
    """Create the step generator for algorithm `key` over `array`.

    Raises:
        UnknownAlgorithm: If `key` is not registered.
    """
    try:
        algorithm = ALGORITHMS[key]
    except KeyError:
        raise UnknownAlgorithm(key) from None
    return algorithm(array)


__all__ = [
    "ALGORITHMS",
    "build_steps",
    "mark_all_sorted",
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "radix_sort",
    "counting_sort",
]
