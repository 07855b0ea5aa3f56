"""
Score and Ranking types.

A Ranking is a max-priority queue of Scores: the presentation layer
repeatedly pops the best remaining entry until the queue is empty.

Tie-break: Scores with equal rank values come out in an unspecified
order. The heap does not preserve insertion order for equal keys and
callers must not rely on it.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

from ..core.types import EXACT_MATCH_RANK


@dataclass(frozen=True)
class Score:
    """
    Rank value of one archetype for one profile.

    Equality compares name and rank value; ordering compares rank value only.
    """

    name: str
    rank_value: float

    def __post_init__(self) -> None:
        # Rank values live at float32 precision; anything past its range
        # overflows to inf and is rejected below
        with np.errstate(over="ignore"):
            value = float(np.float32(float(self.rank_value)))
        if not math.isfinite(value):
            raise ValueError(
                f"rank value for {self.name!r} must be a finite float32, got {self.rank_value}"
            )
        object.__setattr__(self, "rank_value", value)

    def __lt__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self.rank_value < other.rank_value

    def __le__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self.rank_value <= other.rank_value

    def __gt__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self.rank_value > other.rank_value

    def __ge__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self.rank_value >= other.rank_value

    @property
    def is_exact_match(self) -> bool:
        """Whether this is the degenerate-angle exact-match sentinel."""
        return self.rank_value == EXACT_MATCH_RANK


class _HeapItem:
    """Inverts Score ordering so heapq's min-heap pops the best first."""

    __slots__ = ("score",)

    def __init__(self, score: Score):
        self.score = score

    def __lt__(self, other: "_HeapItem") -> bool:
        return self.score.rank_value > other.score.rank_value


class Ranking:
    """
    Totally ordered set of Scores, retrievable from highest to lowest.

    Usage:
        ranking = classifier.classify(profile, ScoreMethod.VECTOR_PROJECTION)
        while ranking:
            score = ranking.pop()
    """

    def __init__(self, scores: Iterable[Score] = ()):
        self._heap: list[_HeapItem] = [_HeapItem(s) for s in scores]
        heapq.heapify(self._heap)

    def push(self, score: Score) -> None:
        """Add a score."""
        heapq.heappush(self._heap, _HeapItem(score))

    def pop(self) -> Score:
        """
        Remove and return the best remaining score.

        Raises:
            IndexError: If the ranking is empty
        """
        if not self._heap:
            raise IndexError("pop from an empty ranking")
        return heapq.heappop(self._heap).score

    def peek(self) -> Score:
        """Return the best remaining score without removing it."""
        if not self._heap:
            raise IndexError("peek at an empty ranking")
        return self._heap[0].score

    def drain(self) -> Iterator[Score]:
        """Pop every remaining score, best first."""
        while self._heap:
            yield self.pop()

    def sorted(self) -> list[Score]:
        """Best-first list of all scores; leaves the ranking intact."""
        return [item.score for item in sorted(self._heap)]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"Ranking({len(self._heap)} scores)"
