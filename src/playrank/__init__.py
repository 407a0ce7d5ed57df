"""playrank: rank the most played songs of a Google Play Music takeout export."""

__version__ = "0.1.0"
