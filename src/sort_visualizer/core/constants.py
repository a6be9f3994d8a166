"""Centralized constants for the Sorting Visualizer.

This file contains:
- Algorithm and visual mode catalogues (key, display name)
- Static complexity annotations per algorithm
- Element state colours used by renderers
- Report column names
"""

from dataclasses import dataclass

# --- Catalogues (ordered as the UI slider cycles through them) ---
ALGORITHM_NAMES: dict[str, str] = {
    "bubble": "Bubble Sort",
    "selection": "Selection Sort",
    "insertion": "Insertion Sort",
    "merge": "Merge Sort",
    "quick": "Quick Sort",
    "heap": "Heap Sort",
    "radix": "Radix Sort",
    "counting": "Counting Sort",
}

VISUAL_MODE_NAMES: dict[str, str] = {
    "bars": "Bars",
    "dots": "Dots",
    "blocks": "3D Blocks",
    "particles": "Particles",
}

# Algorithms whose exchange counter counts single-slot writes, not swaps.
SHIFT_ALGORITHMS = frozenset({"insertion", "merge"})


@dataclass(frozen=True)
class AlgorithmInfo:
    """Static annotations displayed next to the live metrics."""

    title: str
    time_complexity: str
    space_complexity: str
    description: str


ALGORITHM_INFO: dict[str, AlgorithmInfo] = {
    "bubble": AlgorithmInfo(
        "Bubble Sort",
        "O(n²)",
        "O(1)",
        "Repeatedly compares adjacent elements and swaps them if they are out of order.",
    ),
    "selection": AlgorithmInfo(
        "Selection Sort",
        "O(n²)",
        "O(1)",
        "Finds the minimum of the unsorted portion and places it at its front.",
    ),
    "insertion": AlgorithmInfo(
        "Insertion Sort",
        "O(n²)",
        "O(1)",
        "Builds the sorted prefix one element at a time by shifting larger elements right.",
    ),
    "merge": AlgorithmInfo(
        "Merge Sort",
        "O(n log n)",
        "O(n)",
        "Divides the array in halves and merges the sorted halves back together.",
    ),
    "quick": AlgorithmInfo(
        "Quick Sort",
        "O(n log n)",
        "O(log n)",
        "Partitions around the last element as pivot and recurses on both sides.",
    ),
    "heap": AlgorithmInfo(
        "Heap Sort",
        "O(n log n)",
        "O(1)",
        "Builds a max heap and repeatedly moves the root behind the heap.",
    ),
    "radix": AlgorithmInfo(
        "Radix Sort",
        "O(nk)",
        "O(n+k)",
        "Stable bucket pass per decimal digit, least significant digit first.",
    ),
    "counting": AlgorithmInfo(
        "Counting Sort",
        "O(n+k)",
        "O(k)",
        "Counts occurrences over [min, max] and places elements by cumulative count.",
    ),
}

# --- Element state colours (renderers only) ---
STATE_COLORS: dict[str, str] = {
    "default": "#1FB8CD",
    "comparing": "#FFC185",
    "swapping": "#B4413C",
    "sorted": "#5D878F",
    "pivot": "#DB4545",
}


# --- Dataframe Column Names (Strong Typing) ---
class ColumnNames:
    """Strongly typed column names for the algorithm comparison DataFrame."""

    ALGORITHM = "algorithm"
    TITLE = "title"
    SIZE = "size"
    COMPARISONS = "comparisons"
    EXCHANGES = "exchanges"
    EXCHANGE_LABEL = "exchange_label"
    FRAMES = "frames"
    TIME_COMPLEXITY = "time_complexity"
    SPACE_COMPLEXITY = "space_complexity"
    IS_SORTED = "is_sorted"
