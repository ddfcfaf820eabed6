import threading

import numpy as np

_LOCAL = threading.local()


def seeded_rng(seed: int) -> np.random.Generator:
    return np.random.default_rng(seed)


def default_rng() -> np.random.Generator:
    """Unseeded generator private to the calling thread.

    numpy generators are not safe to share between threads, so each thread
    lazily gets its own.
    """
    rng = getattr(_LOCAL, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _LOCAL.rng = rng
    return rng
