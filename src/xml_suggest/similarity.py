"""Typo detection using a threshold-bounded Levenshtein distance."""

import math
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from .consts import MAX_DISTANCE_DIFF_RATIO


class ClassifiedCandidate(NamedTuple):
    """A candidate name with its similarity verdict."""

    name: str
    is_similar: bool


def distance_threshold(reference: str, ratio: float = MAX_DISTANCE_DIFF_RATIO) -> int:
    """Largest edit distance at which `reference` still counts as a typo.

    Rounds half up, so a 6 character name allows round(2.4) == 2 edits.
    """
    return math.floor(ratio * len(reference) + 0.5)


def bounded_levenshtein(left: str, right: str, threshold: int) -> int | None:
    """Compute the Levenshtein distance between two strings if it is small.

    Only the diagonal band of width ``2 * threshold + 1`` of the dynamic
    programming matrix is filled, and the computation stops as soon as a whole
    row exceeds the threshold, so the cost is O(threshold * len) rather than
    O(len(left) * len(right)).

    Args:
        left: First string.
        right: Second string.
        threshold: Maximum distance of interest, non-negative.

    Returns:
        The distance when it is at most `threshold`, otherwise None.

    Raises:
        ValueError: If threshold is negative.
    """
    if threshold < 0:
        raise ValueError(f"Threshold must not be negative: {threshold}")

    # Columns run over the shorter string
    if len(left) > len(right):
        left, right = right, left
    n, m = len(left), len(right)

    if m - n > threshold:
        return None
    if n == 0:
        return m

    # Every value above the threshold is equivalent, cap them all here
    limit = threshold + 1
    previous = [i if i <= threshold else limit for i in range(n + 1)]
    current = [limit] * (n + 1)

    for j in range(1, m + 1):
        char = right[j - 1]
        low = max(1, j - threshold)
        high = min(n, j + threshold)

        current[0] = j if j <= threshold else limit
        if low > 1:
            current[low - 1] = limit
        row_min = current[0] if low == 1 else limit

        for i in range(low, high + 1):
            if left[i - 1] == char:
                cost = previous[i - 1]
            else:
                cost = 1 + min(previous[i - 1], previous[i], current[i - 1])
            if cost > limit:
                cost = limit
            current[i] = cost
            if cost < row_min:
                row_min = cost

        if row_min > threshold:
            return None
        previous, current = current, previous

    distance = previous[n]
    return distance if distance <= threshold else None


def is_similar(
    reference: str, observed: str, ratio: float = MAX_DISTANCE_DIFF_RATIO
) -> bool:
    """Whether `observed` is plausibly a misspelling of `reference`.

    The threshold grows with the length of `reference`, so the arguments are
    not interchangeable.
    """
    threshold = distance_threshold(reference, ratio)
    return bounded_levenshtein(reference, observed, threshold) is not None


def classify(
    candidates: Iterable[str], observed: str, ratio: float = MAX_DISTANCE_DIFF_RATIO
) -> Iterator[ClassifiedCandidate]:
    """Tag every candidate with whether it is similar to `observed`."""
    for candidate in candidates:
        yield ClassifiedCandidate(candidate, is_similar(candidate, observed, ratio))
