"""Exceptions raised by the Game of Life engines and drivers."""


class InvalidArgument(ValueError):
    """A parameter failed validation at an entry point (bad dimension, count or missing reference)."""
