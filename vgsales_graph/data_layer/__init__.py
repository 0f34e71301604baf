"""
Data layer for the video game sales dataset.
"""

from .records import GameRecord, MalformedRowError, load_game_records

__all__ = ["GameRecord", "MalformedRowError", "load_game_records"]
