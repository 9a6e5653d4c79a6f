"""
Root-finding methods.
"""

from .bisection import bisection, dichotomy, InvalidBracketError

__all__ = ["bisection", "dichotomy", "InvalidBracketError"]
