"""
Probability table data model
"""

from .table import ProbabilityTable, DEFAULT_PROBABILITY

__all__ = [
    'ProbabilityTable',
    'DEFAULT_PROBABILITY'
]
