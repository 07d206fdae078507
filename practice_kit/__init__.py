"""Small practice exercises covering games, counters, dates, strings and arithmetic."""

__version__ = "0.1.0"