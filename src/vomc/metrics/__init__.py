from .branching import mean_branching_entropy, mean_branching_entropy_weighted
from .complexity import n_observations, n_windows
from .distribution import multiset_distribution, successor_distribution
from .predictive import log_loss_with_context

__all__ = [
    "successor_distribution",
    "multiset_distribution",
    "n_windows",
    "n_observations",
    "mean_branching_entropy",
    "mean_branching_entropy_weighted",
    "log_loss_with_context",
]
