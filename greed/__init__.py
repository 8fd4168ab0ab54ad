"""
Greed.

A dice game engine: scoring, turns and rounds for the game of Greed.
"""

__version__ = "0.1.0"
