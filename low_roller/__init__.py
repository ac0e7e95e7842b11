"""
Low Roller.

A turn-based dice game where 4s count for nothing and the lowest total wins.
"""

__version__ = "0.1.0"
