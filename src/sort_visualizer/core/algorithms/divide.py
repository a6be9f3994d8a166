"""Recursive sorts: merge, quick, heap.

Recursion goes through `yield from`, so closing the outermost generator
unwinds every pending frame at once.
"""

from collections.abc import Generator

from sort_visualizer.core import steps
from sort_visualizer.core.elements import ElementState, SortArray
from sort_visualizer.core.steps import Step, StepKind, StepStream, tone_for

DEFAULT = ElementState.DEFAULT
COMPARING = ElementState.COMPARING
SWAPPING = ElementState.SWAPPING
SORTED = ElementState.SORTED
PIVOT = ElementState.PIVOT


# ---------------------------------------------------------------------------
# Merge sort
# ---------------------------------------------------------------------------


def merge_sort(array: SortArray, left: int = 0, right: int | None = None) -> StepStream:
    """Top-down merge sort over the inclusive range [left, right]."""
    if right is None:
        right = len(array) - 1
    if left < right:
        mid = (left + right) // 2
        yield from merge_sort(array, left, mid)
        yield from merge_sort(array, mid + 1, right)
        yield from _merge(array, left, mid, right)


def _merge(array: SortArray, left: int, mid: int, right: int) -> StepStream:
    """Copy two materialized halves back slot by slot; ties take the left half."""
    left_half = array.snapshot(left, mid + 1)
    right_half = array.snapshot(mid + 1, right + 1)

    span = tuple(range(left, right + 1))
    array.mark(COMPARING, *span)
    yield steps.frame(*span)

    i = j = 0
    k = left
    while i < len(left_half) and j < len(right_half):
        if left_half[i].value <= right_half[j].value:
            source = left_half[i]
            i += 1
        else:
            source = right_half[j]
            j += 1
        array.assign(k, source.copy(SWAPPING))
        yield Step(
            StepKind.WRITE,
            (k,),
            comparisons=1,
            exchanges=1,
            tone=tone_for(source.value),
        )
        k += 1

    # Whatever is left in one half is already in order.
    for source in left_half[i:] + right_half[j:]:
        array.assign(k, source.copy(SWAPPING))
        yield Step(StepKind.WRITE, (k,), exchanges=1)
        k += 1

    array.mark(DEFAULT, *span)
    yield steps.progress((right - left + 1) / len(array))


# ---------------------------------------------------------------------------
# Quick sort
# ---------------------------------------------------------------------------


def quick_sort(array: SortArray, low: int = 0, high: int | None = None) -> StepStream:
    """Lomuto quick sort; the placed pivot is excluded from both recursions."""
    if high is None:
        high = len(array) - 1
    if low < high:
        pivot_index = yield from _partition(array, low, high)
        yield from quick_sort(array, low, pivot_index - 1)
        yield from quick_sort(array, pivot_index + 1, high)


def _partition(array: SortArray, low: int, high: int) -> Generator[Step, None, int]:
    """Partition [low, high] around array[high]; returns the pivot's final index."""
    pivot_value = array[high].value
    array.mark(PIVOT, high)

    i = low - 1
    for j in range(low, high):
        array.mark(COMPARING, j)
        yield steps.compare(j, high)

        if array[j].value < pivot_value:
            i += 1
            if i != j:
                array.mark(SWAPPING, i, j)
                yield steps.swap(i, j)
                array.exchange(i, j)
                yield steps.exchanged(i, j, value=array[i].value)

        array.mark(DEFAULT, j)
        if i >= low:
            array.mark(DEFAULT, i)

    if i + 1 != high:
        array.mark(SWAPPING, i + 1)
        yield steps.swap(i + 1, high)
        array.exchange(i + 1, high)
        yield steps.exchanged(i + 1, high, value=array[i + 1].value)
        array.mark(DEFAULT, high)

    array.mark(SORTED, i + 1)
    yield steps.progress((high - low + 1) / len(array))
    return i + 1


# ---------------------------------------------------------------------------
# Heap sort
# ---------------------------------------------------------------------------


def heap_sort(array: SortArray) -> StepStream:
    """Build a max heap bottom-up, then move the root behind the heap n-1 times."""
    n = len(array)
    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(array, n, i)

    for i in range(n - 1, 0, -1):
        array.mark(SWAPPING, 0, i)
        yield steps.swap(0, i)
        array.exchange(0, i)
        yield steps.exchanged(0, i, value=array[i].value)

        array.mark(SORTED, i)
        array.mark(DEFAULT, 0)
        yield from _heapify(array, i, 0)
        yield steps.progress((n - i) / n)

    if n:
        array.mark(SORTED, 0)


def _heapify(array: SortArray, size: int, i: int) -> StepStream:
    """Sift array[i] down within the first `size` slots."""
    largest = i
    left = 2 * i + 1
    right = 2 * i + 2
    children = [c for c in (left, right) if c < size]

    array.mark(COMPARING, i, *children)
    for child in children:
        if array[child].value > array[largest].value:
            largest = child
    yield steps.compare(i, *children, count=len(children))

    if largest != i:
        array.mark(SWAPPING, i, largest)
        yield steps.swap(i, largest)
        array.exchange(i, largest)
        yield steps.exchanged(i, largest, value=array[i].value)

        array.mark(DEFAULT, i, largest, *children)
        yield from _heapify(array, size, largest)
    else:
        array.mark(DEFAULT, i, *children)
