"""Variable-order Markov chain with longest-window fallback."""

import logging
import operator
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from vomc.types import State, StateSequence, Window
from vomc.utils.rng import default_rng

from .protocols import Match, RandomSource

LOGGER = logging.getLogger(__name__)


def _non_negative(value: int, *, name: str) -> int:
    ivalue = operator.index(value)
    if ivalue < 0:
        raise ValueError(f"{name} must be >= 0, got {ivalue}.")
    return ivalue


@dataclass(frozen=True, eq=False)
class ChainModel:
    """Successor multisets keyed by every history window shorter than `max_order`.

    Build instances with `train`; the table is read-only afterwards.
    """

    max_order: int

    # Window (tuple of states, possibly empty) -> observed successors,
    # duplicates kept, in order of appearance in the training input.
    table: Mapping[Window, Tuple[State, ...]]

    def __post_init__(self) -> None:
        _non_negative(self.max_order, name="max_order")
        table = {tuple(k): tuple(v) for k, v in self.table.items()}
        for window in table:
            if len(window) >= self.max_order:
                raise ValueError(
                    f"window {window!r} has length {len(window)}; max_order={self.max_order} allows at most {self.max_order - 1}."
                )
        object.__setattr__(self, "table", MappingProxyType(table))

    @classmethod
    def train(cls, max_order: int, states: Iterable[State]) -> "ChainModel":
        return train(max_order, states)

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, window: object) -> bool:
        return window in self.table

    def successors(self, window: Iterable[State]) -> Tuple[State, ...]:
        return self.table.get(tuple(window), ())

    def windows(self, order: Optional[int] = None) -> Iterator[Window]:
        """Trained windows, optionally only those of length `order`."""
        if order is None:
            return iter(self.table)
        order = _non_negative(order, name="order")
        return (w for w in self.table if len(w) == order)

    def match(self, history: StateSequence, order: Optional[int] = None) -> Optional[Match]:
        """Find the longest trained suffix of `history`, at most `order` long.

        A history shorter than the requested order is matched as a whole
        before shorter suffixes are tried. The search ends with the empty
        window, so any model trained on non-empty input always matches.
        """
        if order is None:
            order = self.max_order
        order = _non_negative(order, name="order")

        if not isinstance(history, tuple):
            history = tuple(history)

        # Suffix lengths beyond len(history) all yield the whole history.
        remaining = min(order, self.max_order, len(history))
        while remaining >= 0:
            window = history[len(history) - remaining :]
            successors = self.table.get(window)
            if successors:
                return Match(window=window, successors=successors)
            LOGGER.debug("No successors for window of length %d; falling back", remaining)
            remaining -= 1

        LOGGER.debug("No trained window for history of length %d (order=%d)", len(history), order)
        return None

    def generate(self, history: StateSequence, rng: Optional[RandomSource] = None) -> Optional[State]:
        return generate(self, history, rng=rng)

    def generate_with_order(
        self,
        order: int,
        history: StateSequence,
        rng: Optional[RandomSource] = None,
    ) -> Optional[State]:
        return generate_with_order(self, order, history, rng=rng)


def train(max_order: int, states: Iterable[State]) -> ChainModel:
    """Record every (window, successor) pair for window lengths 0 .. max_order-1.

    Inputs shorter than a window simply contribute nothing at that length;
    an empty input gives an empty table.
    """
    max_order = _non_negative(max_order, name="max_order")
    seq = tuple(states)

    table: Dict[Window, List[State]] = defaultdict(list)
    for order in range(max_order):
        for start in range(len(seq) - order):
            window = seq[start : start + order + 1]
            table[window[:order]].append(window[order])

    LOGGER.debug(
        "Trained chain | max_order=%d states=%d windows=%d",
        max_order,
        len(seq),
        len(table),
    )
    return ChainModel(
        max_order=max_order,
        table=dict(table),
    )


def generate(
    model: ChainModel,
    history: StateSequence,
    rng: Optional[RandomSource] = None,
) -> Optional[State]:
    return generate_with_order(model, model.max_order, history, rng=rng)


def generate_with_order(
    model: ChainModel,
    order: int,
    history: StateSequence,
    rng: Optional[RandomSource] = None,
) -> Optional[State]:
    """Sample a successor of the longest matching window, or None.

    Each recorded occurrence is equally likely, so successors seen more often
    are proportionally favoured. `order` is clamped to `model.max_order`.
    """
    found = model.match(history, order)
    if found is None:
        return None
    if rng is None:
        rng = default_rng()
    return found.successors[int(rng.integers(len(found.successors)))]
