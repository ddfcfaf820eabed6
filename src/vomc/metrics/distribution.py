from collections import Counter
from typing import Dict, Optional, Tuple

from vomc.chain.model import ChainModel
from vomc.types import State, StateSequence


def multiset_distribution(successors: Tuple[State, ...]) -> Dict[State, float]:
    """Normalised multiplicities of a successor multiset."""
    if not successors:
        return {}
    counts = Counter(successors)
    total = len(successors)
    return {s: c / total for s, c in counts.items()}


def successor_distribution(
    model: ChainModel,
    history: StateSequence,
    order: Optional[int] = None,
) -> Dict[State, float]:
    """Sampling distribution of `generate_with_order` for this history.

    Empty when the model has no trained window to fall back to.
    """
    found = model.match(history, order)
    if found is None:
        return {}
    return multiset_distribution(found.successors)
