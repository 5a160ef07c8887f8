"""Indeed Easy Apply automation: log in, search, click through apply flows, report."""

__version__ = "0.1.0"
