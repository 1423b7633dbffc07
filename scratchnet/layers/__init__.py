from .Layer import Layer

__all__ = [
    "Layer",
]
