import math
from typing import Optional

from vomc.chain.model import ChainModel

from .distribution import multiset_distribution


def mean_branching_entropy(
    model: ChainModel,
    order: Optional[int] = None,
    log_base: float = math.e,
) -> float:
    """
    Mean entropy of the successor distribution per trained window:

        H(X_{t+1} | window=w) = - sum_x p(x|w) log p(x|w)

    Returns the unweighted mean over windows (of length `order` when given),
    or 0.0 when there are none.

    log_base:
      - math.e -> nats
      - 2.0    -> bits
    """
    if log_base <= 0.0 or log_base == 1.0:
        raise ValueError(f"log_base must be positive and != 1, got {log_base}.")

    entropies = []
    for window in model.windows(order):
        dist = multiset_distribution(model.table[window])
        h = 0.0
        for p in dist.values():
            h -= p * math.log(p)
        if log_base != math.e:
            h /= math.log(log_base)
        entropies.append(h)

    return sum(entropies) / (len(entropies) or 1)


def mean_branching_entropy_weighted(
    model: ChainModel,
    order: Optional[int] = None,
    log_base: float = math.e,
) -> float:
    """
    Variant weighting each window by how often it was observed in training,
    i.e. the expected branching entropy at a random training position.
    """
    if log_base <= 0.0 or log_base == 1.0:
        raise ValueError(f"log_base must be positive and != 1, got {log_base}.")

    total_w = 0
    total = 0.0
    for window in model.windows(order):
        successors = model.table[window]
        h = 0.0
        for p in multiset_distribution(successors).values():
            h -= p * math.log(p)
        if log_base != math.e:
            h /= math.log(log_base)
        total_w += len(successors)
        total += len(successors) * h

    if total_w == 0:
        return 0.0
    return total / total_w
