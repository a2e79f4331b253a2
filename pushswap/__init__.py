"""Stacks and operations for the two-stack sorting puzzle, with input checks and helpers."""

__version__ = "0.1.0"