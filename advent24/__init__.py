"""Solvers and simulations for a set of Advent of Code 2024 puzzles."""

__version__ = "0.1.0"