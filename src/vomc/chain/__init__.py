from .model import ChainModel, generate, generate_with_order, train
from .protocols import Match, RandomSource

__all__ = [
    "ChainModel",
    "Match",
    "RandomSource",
    "train",
    "generate",
    "generate_with_order",
]
