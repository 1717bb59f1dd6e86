"""Classic programming-contest exercises as Python functions, with a runner for multi-case problems."""

__version__ = "0.1.0"