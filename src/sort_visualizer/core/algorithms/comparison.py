"""Quadratic comparison sorts: bubble, selection, insertion.

Progress is the fraction of outer iterations completed.
"""

from sort_visualizer.core import steps
from sort_visualizer.core.elements import ElementState, SortArray
from sort_visualizer.core.steps import Step, StepKind, StepStream, tone_for

DEFAULT = ElementState.DEFAULT
COMPARING = ElementState.COMPARING
SWAPPING = ElementState.SWAPPING
SORTED = ElementState.SORTED


def bubble_sort(array: SortArray) -> StepStream:
    """Adjacent double loop; slot n-i-1 settles after pass i."""
    n = len(array)
    for i in range(n):
        for j in range(n - i - 1):
            array.mark(COMPARING, j, j + 1)
            yield steps.compare(j, j + 1, progress=i / n)

            if array[j].value > array[j + 1].value:
                array.mark(SWAPPING, j, j + 1)
                yield steps.swap(j, j + 1)
                array.exchange(j, j + 1)
                yield steps.exchanged(j, j + 1, value=array[j].value)

            array.mark(DEFAULT, j, j + 1)
        array.mark(SORTED, n - i - 1)


def selection_sort(array: SortArray) -> StepStream:
    """Track the running minimum; exchange only when it moved off slot i."""
    n = len(array)
    for i in range(n):
        min_idx = i
        array.mark(COMPARING, min_idx)

        for j in range(i + 1, n):
            array.mark(COMPARING, j)
            yield steps.compare(j, min_idx)

            if array[j].value < array[min_idx].value:
                array.mark(DEFAULT, min_idx)
                min_idx = j
                array.mark(COMPARING, min_idx)
            else:
                array.mark(DEFAULT, j)

        if min_idx != i:
            array.mark(SWAPPING, i, min_idx)
            yield steps.swap(i, min_idx)
            array.exchange(i, min_idx)
            yield steps.exchanged(i, min_idx, value=array[i].value)

        array.mark(SORTED, i)
        if min_idx != i:
            array.mark(DEFAULT, min_idx)
        yield steps.progress(i / n)


def insertion_sort(array: SortArray) -> StepStream:
    """Shift larger elements right one slot at a time, then drop the key in.

    The exchange counter counts shifts. Only comparisons that lead to a
    shift are counted.
    """
    n = len(array)
    for i in range(1, n):
        key = array[i].copy(COMPARING)
        j = i - 1

        array.mark(COMPARING, i)
        yield steps.frame(i)

        while j >= 0 and array[j].value > key.value:
            array.mark(SWAPPING, j)
            yield steps.compare(j, j + 1)

            array.assign(j + 1, array[j].copy(SWAPPING))
            yield Step(
                StepKind.SHIFT,
                (j, j + 1),
                exchanges=1,
                tone=tone_for(array[j].value),
                render=False,
            )
            j -= 1
            yield steps.frame(j + 1, j + 2)

            if j >= 0:
                array.mark(DEFAULT, j)
            array.mark(DEFAULT, j + 2)

        array.assign(j + 1, key.copy(DEFAULT))
        yield steps.progress(i / n)
