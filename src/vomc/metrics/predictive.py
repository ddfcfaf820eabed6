import math
from typing import Iterator, NamedTuple, Optional, Sequence

from vomc.chain.model import ChainModel
from vomc.types import State, Window

from .distribution import successor_distribution


class _EvalTerm(NamedTuple):
    history: Window
    y_next: State


def _iter_eval_terms(
    x: Sequence[State],
    *,
    start_t: int,
    lookback: int,
) -> Iterator[_EvalTerm]:
    """Yield (bounded history, next-state) terms for one-step evaluation."""
    if start_t < 0:
        raise ValueError(f"start_t must be >= 0, got {start_t}.")
    if start_t > len(x):
        raise ValueError(f"start_t must be <= len(x), got {start_t} for sequence length {len(x)}.")

    for t in range(start_t, len(x)):
        yield _EvalTerm(
            history=tuple(x[max(0, t - lookback) : t]),
            y_next=x[t],
        )


def log_loss_with_context(
    model: ChainModel,
    x_context: Sequence[State],
    x_eval: Sequence[State],
    order: Optional[int] = None,
) -> float:
    """Average one-step negative log-likelihood of `x_eval` given all preceding states.

    Each held-out state is scored under the successor distribution of the
    window the model would sample from. States the model never saw after
    that window get probability eps.
    """
    if len(model) == 0:
        raise ValueError("log_loss_with_context requires a model trained on non-empty input.")

    eps = 1e-12
    x_full = tuple(x_context) + tuple(x_eval)
    split = len(x_context)

    total_loss = 0.0
    n_terms = 0
    for history, y_next in _iter_eval_terms(x_full, start_t=split, lookback=model.max_order):
        p = successor_distribution(model, history, order).get(y_next, 0.0)
        total_loss += -math.log(max(p, eps))
        n_terms += 1

    if n_terms == 0:
        raise ValueError("No held-out one-step terms are evaluable: x_eval is empty.")
    return total_loss / n_terms
