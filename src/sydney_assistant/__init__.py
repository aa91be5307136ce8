"""Sydney: rule-based trading-journal assistant."""

__version__ = "0.1.0"
