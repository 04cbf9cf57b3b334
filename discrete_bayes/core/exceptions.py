"""
Custom exceptions for the discrete Naive Bayes classifier
"""

from typing import Any, Mapping, Optional


class DiscreteBayesError(Exception):
    """Base exception for discrete_bayes"""
    pass

class ConfigurationError(DiscreteBayesError):
    """Configuration-related errors"""
    pass

class ModelError(DiscreteBayesError):
    """Structural errors in the probability table"""
    pass

class DuplicateKeyError(ModelError):
    """A label, feature or state with this name already exists"""
    pass

class NotFoundError(ModelError):
    """A referenced label, feature or state does not exist"""
    pass

class ModelFormatError(ModelError):
    """A model file or mapping could not be turned into a table"""
    pass

class InferenceError(DiscreteBayesError):
    """Validation and posterior computation errors"""
    pass

class InconsistentModelError(InferenceError):
    """Priors or conditionals do not form a probability distribution"""

    def __init__(self, message: str, total: float,
                 feature: Optional[str] = None, label: Optional[str] = None):
        super().__init__(message)
        self.total = total
        self.feature = feature
        self.label = label

class DegenerateEvidenceError(InferenceError):
    """The observations have zero probability under every class label"""

    def __init__(self, message: str, observations: Mapping[str, Any]):
        super().__init__(message)
        self.observations = dict(observations)
