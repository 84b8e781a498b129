"""mediashelf - personal catalog for games, songs and clips."""

__version__ = "0.1.0"
