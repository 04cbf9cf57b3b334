"""
Core discrete_bayes components
"""

from .config import Config
from .exceptions import (
    DiscreteBayesError,
    ConfigurationError,
    ModelError,
    DuplicateKeyError,
    NotFoundError,
    ModelFormatError,
    InferenceError,
    InconsistentModelError,
    DegenerateEvidenceError,
)

__all__ = [
    'Config',
    'DiscreteBayesError',
    'ConfigurationError',
    'ModelError',
    'DuplicateKeyError',
    'NotFoundError',
    'ModelFormatError',
    'InferenceError',
    'InconsistentModelError',
    'DegenerateEvidenceError'
]
