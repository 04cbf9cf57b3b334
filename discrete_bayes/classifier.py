"""
Naive Bayes classifier over discrete features

Example:

    c = NaiveBayesClassifier()
    for label in ("Flu", "Measles", "No disease"):
        c.add_label(label)
    c.add_feature("Fever")
    c.add_state("Fever", "yes")
    c.add_state("Fever", "no")
    c.set_prior("Flu", 0.06)
    ...
    c.set_conditional("Fever", "yes", "Flu", 0.90)
    ...
    c.classify({"Fever": "yes"})   # posterior in label order

New labels and states start at probability 1.0; set the real priors and
conditionals before classifying. classify() validates the table first.

An instance holds no lock. Callers sharing one across threads must
serialize every mutation and every classify() call themselves.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .core.config import Config
from .inference.engine import InferenceEngine, Posterior
from .inference.validator import Validator
from .model.table import ProbabilityTable

logger = logging.getLogger(__name__)


class NaiveBayesClassifier:
    """
    Class labels, features, priors and conditionals plus exact inference

    Args:
        config: Configuration; `classifier.tolerance` sets the validation tolerance
        tolerance: Overrides the configured tolerance (0.0 = exact equality)
    """

    def __init__(self, config: Optional[Config] = None, tolerance: Optional[float] = None):
        self.config = config or Config()
        if tolerance is None:
            tolerance = self.config.tolerance

        self.table = ProbabilityTable()
        self.validator = Validator(tolerance)
        self.engine = InferenceEngine(self.validator)

        logger.info(f"NaiveBayesClassifier initialized (tolerance={self.validator.tolerance})")

    @property
    def tolerance(self) -> float:
        return self.validator.tolerance

    # Structure

    def add_label(self, name: str) -> None:
        self.table.add_label(name)

    def remove_label(self, name: str) -> None:
        self.table.remove_label(name)

    def add_feature(self, name: str) -> None:
        self.table.add_feature(name)

    def remove_feature(self, name: str) -> None:
        self.table.remove_feature(name)

    def add_state(self, feature: str, state: str) -> None:
        self.table.add_state(feature, state)

    def remove_state(self, feature: str, state: str) -> None:
        self.table.remove_state(feature, state)

    # Probabilities

    def set_prior(self, label: str, probability: float) -> None:
        """Set P(label), the result of classify() with nothing observed"""
        self.table.set_prior(label, probability)

    def set_conditional(self, feature: str, state: str, label: str, probability: float) -> None:
        """Set P(feature=state | label)"""
        self.table.set_conditional(feature, state, label, probability)

    # Snapshots

    def get_labels(self) -> List[str]:
        return self.table.get_labels()

    def get_features(self) -> List[str]:
        return self.table.get_features()

    def get_states(self, feature: str) -> List[str]:
        return self.table.get_states(feature)

    def get_priors(self) -> List[float]:
        return self.table.get_priors()

    def get_conditionals(self, feature: str, state: str) -> List[float]:
        return self.table.get_conditionals(feature, state)

    # Inference

    def validate(self) -> None:
        """Raise InconsistentModelError unless priors and conditionals sum to 1.0"""
        self.validator.validate(self.table)

    def classify(self, observations: Mapping[str, str]) -> List[float]:
        """Posterior probability of every class label, in label order"""
        return self.engine.classify(self.table, observations)

    def posterior(self, observations: Mapping[str, str]) -> Posterior:
        return self.engine.posterior(self.table, observations)

    def predict(self, observations: Mapping[str, str]) -> Optional[str]:
        """Most probable class label given the observations"""
        return self.posterior(observations).most_probable()

    # Mapping form, see persistence.py for the file format

    def to_dict(self) -> Dict[str, Any]:
        labels = self.get_labels()
        features: Dict[str, Dict[str, Dict[str, float]]] = {}
        for feature in self.get_features():
            features[feature] = {
                state: dict(zip(labels, self.get_conditionals(feature, state)))
                for state in self.get_states(feature)
            }
        return {
            'labels': dict(zip(labels, self.get_priors())),
            'features': features
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], config: Optional[Config] = None,
                  tolerance: Optional[float] = None) -> 'NaiveBayesClassifier':
        from .persistence import populate
        classifier = cls(config=config, tolerance=tolerance)
        populate(classifier, data)
        return classifier
