from .SGDOptimizer import SGDOptimizer
from .AdamOptimizer import AdamOptimizer

__all__ = [
    "SGDOptimizer",
    "AdamOptimizer",
]
