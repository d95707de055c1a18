"""
FPL Squad Picker Package

A Fantasy Premier League (FPL) squad recommender. Given a catalog of players with
prices and projected-points signals, it builds three independent 15-player squads
(Balanced, Value and Aggressive strategies), each with a starting XI in a legal
formation, an ordered bench, and captain / vice-captain picks.
"""

__version__ = "1.0.0"
