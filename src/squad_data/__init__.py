"""
Squad Data

Turns the players / matches / player_stats spreadsheet tabs of a club
sheet into a season-scoped JSON snapshot: quote-aware CSV parsing,
schema normalization and referential season filtering.
"""

__version__ = "1.0.0"
__author__ = "Squad Data Team"
