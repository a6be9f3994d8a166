"""Distribution sorts: radix (LSD, base 10) and counting.

Both count keys into a histogram, turn it into cumulative counts, and place
records back-to-front into an output buffer so equal keys keep their order.
The buffer is written back to the array in one step, so the array never
shows a half-distributed state.
"""

from sort_visualizer.core.elements import ElementState, SortArray
from sort_visualizer.core.steps import Step, StepKind, StepStream, frame, progress, tone_for

DEFAULT = ElementState.DEFAULT
COMPARING = ElementState.COMPARING
SWAPPING = ElementState.SWAPPING

RADIX = 10


def radix_sort(array: SortArray) -> StepStream:
    """One stable digit pass per decimal digit of the maximum value."""
    if not len(array):
        return
    maximum = max(array.values())
    total_passes = len(str(maximum))

    exp = 1
    passes = 0
    while maximum // exp > 0:
        yield from _digit_pass(array, exp)
        passes += 1
        yield progress(passes / total_passes)
        exp *= RADIX


def _digit_pass(array: SortArray, exp: int) -> StepStream:
    n = len(array)
    count = [0] * RADIX

    for i in range(n):
        array.mark(COMPARING, i)
        count[(array[i].value // exp) % RADIX] += 1
    yield Step(StepKind.TALLY, comparisons=n)

    for d in range(1, RADIX):
        count[d] += count[d - 1]

    output = [None] * n
    for i in range(n - 1, -1, -1):
        digit = (array[i].value // exp) % RADIX
        output[count[digit] - 1] = array[i].copy(SWAPPING)
        count[digit] -= 1
        yield Step(
            StepKind.PLACE,
            (i,),
            exchanges=1,
            tone=tone_for(array[i].value),
            render=False,
        )

    for i, element in enumerate(output):
        array.assign(i, element.copy(DEFAULT))
    yield frame()


def counting_sort(array: SortArray) -> StepStream:
    """Histogram over [min, max], prefix sums, back-to-front placement."""
    n = len(array)
    if not n:
        return
    values = array.values()
    low, high = min(values), max(values)
    count = [0] * (high - low + 1)

    for i in range(n):
        array.mark(COMPARING, i)
        count[array[i].value - low] += 1
        yield Step(StepKind.TALLY, (i,), comparisons=1)

    for k in range(1, len(count)):
        count[k] += count[k - 1]

    output = [None] * n
    for i in range(n - 1, -1, -1):
        value = array[i].value
        output[count[value - low] - 1] = array[i].copy(SWAPPING)
        count[value - low] -= 1
        yield Step(
            StepKind.PLACE,
            (i,),
            exchanges=1,
            tone=tone_for(value),
            progress=(n - i) / n,
        )

    for i, element in enumerate(output):
        array.assign(i, element.copy(DEFAULT))
    yield frame()
