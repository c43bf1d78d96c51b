"""FinHealth: personal finance tracking with a financial health score."""

__version__ = "0.1.0"
