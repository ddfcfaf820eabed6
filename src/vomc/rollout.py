import logging
from collections import deque
from typing import Iterable, Iterator, Optional

from vomc.chain.model import ChainModel, generate_with_order
from vomc.chain.protocols import RandomSource
from vomc.types import State
from vomc.utils.rng import default_rng

LOGGER = logging.getLogger(__name__)


def _rollout(
    model: ChainModel,
    history: deque,
    length: int,
    order: int,
    rng: Optional[RandomSource],
) -> Iterator[State]:
    if rng is None:
        rng = default_rng()

    produced = 0
    while produced < length:
        state = generate_with_order(model, order, tuple(history), rng=rng)
        if state is None:
            LOGGER.info("Rollout stopped after %d/%d states: no prediction", produced, length)
            return
        history.append(state)
        produced += 1
        yield state


def generate_sequence(
    model: ChainModel,
    seed: Iterable[State] = (),
    length: int = 100,
    *,
    order: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> Iterator[State]:
    """Yield up to `length` states, feeding each one back as history.

    `seed` primes the history and is not yielded. Generation stops early
    once the model has nothing to predict. Arguments are checked when called,
    before the first state is drawn.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}.")
    if order is None:
        order = model.max_order

    # Lookups never read more than max_order trailing states.
    history: deque = deque(seed, maxlen=max(model.max_order, 1))
    return _rollout(model, history, length, order, rng)
