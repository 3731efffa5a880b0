"""chessgrid — two-player chess with a self-contained rules engine."""

__version__ = "0.1.0"
