"""
Booster Odds, bulk card snapshot processing and pull probabilities
MIT License
"""

from ._version import __version__

__all__ = ["__version__"]
