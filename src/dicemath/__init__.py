"""d6 pool probability engine."""

__version__ = "0.1.0"
