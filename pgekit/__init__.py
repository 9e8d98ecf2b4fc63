"""Game engine building blocks: scalar math, vectors, timers, OBJ models and particle emitters."""

__version__ = "0.1.0"
__all__ = ["mathlib", "vector", "timer", "obj", "particle"]