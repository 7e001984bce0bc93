"""Credit-card statement to CSV conversion with balance reconciliation."""

__version__ = "0.1.0"
