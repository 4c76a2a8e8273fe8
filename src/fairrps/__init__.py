"""Provably fair rock-paper-scissors over any odd set of moves."""

__version__ = "0.1.0"
