"""Terminal pass that tags every slot sorted once an algorithm completes."""

from sort_visualizer.core.elements import ElementState, SortArray
from sort_visualizer.core.steps import Step, StepKind, StepStream, finale_tone_for
from sort_visualizer.schemas.defaults import FINALIZE_DELAY_MS, FINALIZE_STRIDE


def mark_all_sorted(array: SortArray) -> StepStream:
    """Sweep left to right; only every FINALIZE_STRIDE-th slot waits, briefly."""
    for i in range(len(array)):
        array.mark(ElementState.SORTED, i)
        yield Step(
            StepKind.SETTLE,
            (i,),
            tone=finale_tone_for(array[i].value),
            render=i % FINALIZE_STRIDE == 0,
            delay_ms=FINALIZE_DELAY_MS,
        )
    yield Step(StepKind.FRAME, progress=1.0, delay_ms=0)
