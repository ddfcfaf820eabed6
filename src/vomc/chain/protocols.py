from typing import NamedTuple, Protocol, Tuple

from vomc.types import State, Window


class RandomSource(Protocol):
    """Source of uniform integers; ``numpy.random.Generator`` satisfies it."""

    def integers(self, high: int) -> int:
        ...


class Match(NamedTuple):
    # Longest trained window found by the fallback search
    window: Window

    # Successor multiset of `window`, in order of appearance in training
    successors: Tuple[State, ...]
