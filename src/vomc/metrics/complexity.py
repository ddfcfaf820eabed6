"""Model-size metrics."""

from typing import Optional

from vomc.chain.model import ChainModel


def n_windows(model: ChainModel, order: Optional[int] = None) -> int:
    """Number of distinct trained windows, optionally of one length only."""
    if order is None:
        return len(model)
    return sum(1 for _ in model.windows(order))


def n_observations(model: ChainModel, order: Optional[int] = None) -> int:
    """Total successor occurrences recorded, optionally of one window length."""
    windows = model.windows(order)
    return sum(len(model.table[w]) for w in windows)
