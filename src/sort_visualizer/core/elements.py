"""Element and array model.

The array is the only shared mutable resource.  Algorithms change values
exclusively through `SortArray.exchange` and `SortArray.assign`; `mark` only
changes the presentational state tag.  Neither triggers rendering or sound.
"""

import logging
import math
import random
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from enum import Enum

from sort_visualizer.core.errors import EmptyOrInvalidInput, InvalidSize
from sort_visualizer.schemas.defaults import CUSTOM_VALUE_CAP, VALUE_MIN, VALUE_SPAN

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ElementState(str, Enum):
    """Per-slot tag read by renderers. Never affects ordering."""

    DEFAULT = "default"
    COMPARING = "comparing"
    SWAPPING = "swapping"
    SORTED = "sorted"
    PIVOT = "pivot"


@dataclass
class Element:
    """One array slot.

    Attributes:
        value: Positive integer being sorted (<= 300 for custom input).
        state: Presentational tag.
        index: Position at creation time; an identity hint, not a live position.
    """

    value: int
    state: ElementState = ElementState.DEFAULT
    index: int = 0

    def copy(self, state: ElementState | None = None) -> "Element":
        """Return a new record, optionally with a different state."""
        return replace(self, state=self.state if state is None else state)


def _parse_one(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def parse_custom_values(raw: str | Iterable[object]) -> list[int]:
    """Parse user input into clamped positive integers.

    Args:
        raw: Comma-separated text, or a sequence of strings/numbers.

    Returns:
        Values > 0, each clamped to CUSTOM_VALUE_CAP, in input order.

    Raises:
        EmptyOrInvalidInput: If no positive integer could be parsed.
    """
    items = raw.split(",") if isinstance(raw, str) else list(raw)
    values = []
    for item in items:
        value = _parse_one(item)
        if value is not None and value > 0:
            values.append(min(value, CUSTOM_VALUE_CAP))
    if not values:
        raise EmptyOrInvalidInput("No valid numbers found")
    return values


class SortArray:
    """Ordered, fixed-length sequence of Elements shared by one run at a time."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._elements: list[Element] = [
            Element(value=v, index=i) for i, v in enumerate(values)
        ]

    # --- (Re)generation -----------------------------------------------------

    def generate(self, size: int, rng: random.Random | None = None) -> None:
        """Replace contents with `size` uniform values in [10, 309]."""
        if size < 1:
            raise InvalidSize(size)
        _rng = rng or random.Random()
        self._elements = [
            Element(value=_rng.randrange(VALUE_SPAN) + VALUE_MIN, index=i)
            for i in range(size)
        ]
        logger.debug(f"Generated array of {size} elements")

    def set_custom(self, raw: str | Iterable[object]) -> None:
        """Replace contents with parsed user values.

        Parsing happens before any mutation, so a rejected input leaves the
        current contents untouched.
        """
        values = parse_custom_values(raw)
        self._elements = [Element(value=v, index=i) for i, v in enumerate(values)]
        logger.debug(f"Custom array set ({len(values)} elements)")

    # --- Primitive mutators -------------------------------------------------

    def exchange(self, i: int, j: int) -> None:
        """Swap two whole records (value and state travel together)."""
        self._elements[i], self._elements[j] = self._elements[j], self._elements[i]

    def assign(self, i: int, element: Element) -> None:
        """Write a record into slot `i`."""
        self._elements[i] = element

    def mark(self, state: ElementState, *indices: int) -> None:
        """Set the state tag of the given slots."""
        for i in indices:
            self._elements[i].state = state

    # --- Read access --------------------------------------------------------

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, i: int) -> Element:
        return self._elements[i]

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def values(self) -> list[int]:
        return [e.value for e in self._elements]

    def states(self) -> list[ElementState]:
        return [e.state for e in self._elements]

    def snapshot(self, start: int = 0, stop: int | None = None) -> list[Element]:
        """Copies of the records in [start, stop)."""
        return [e.copy() for e in self._elements[start:stop]]

    def is_sorted(self) -> bool:
        values = self.values()
        return all(a <= b for a, b in zip(values, values[1:]))
