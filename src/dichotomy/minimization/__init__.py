"""
Minimization methods for scalar functions.
"""

from .golden_section import goldensection

__all__ = ["goldensection"]
