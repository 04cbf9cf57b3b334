"""
Validation and Bayesian inference components
"""

from .validator import Validator, accumulate
from .engine import InferenceEngine, Posterior

__all__ = [
    'Validator',
    'InferenceEngine',
    'Posterior',
    'accumulate'
]
