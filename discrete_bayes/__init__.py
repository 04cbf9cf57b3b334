"""
discrete_bayes - Naive Bayes classification over discrete features
===================================================================

Stores class labels, features with enumerated states, a prior per class label
and a conditional probability per (feature state, class label), and computes
the exact posterior over class labels given observed feature states.

Core Components:
- Probability table with add/remove of labels, features and states
- Validation of prior and conditional distributions
- Exact inference under the naive (conditional independence) assumption
- YAML model files and a command-line interface
"""

__version__ = "0.1.0"

from .classifier import NaiveBayesClassifier
from .core.config import Config
from .core.exceptions import (
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
from .inference.engine import Posterior
from .persistence import load_model, dump_model

__all__ = [
    'NaiveBayesClassifier',
    'Config',
    'Posterior',
    'load_model',
    'dump_model',
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
