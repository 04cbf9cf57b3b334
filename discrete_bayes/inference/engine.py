"""
Exact Naive Bayes inference

Computes P(label | observations) ∝ P(label) × Π_f P(f = observed state | label)
under the assumption that features are conditionally independent given the
class label. Features missing from the observations contribute no factor.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

import numpy as np

from ..core.exceptions import DegenerateEvidenceError
from ..model.table import ProbabilityTable
from .validator import Validator, accumulate

logger = logging.getLogger(__name__)


@dataclass
class Posterior:
    """Posterior distribution over class labels for one set of observations"""
    labels: List[str]
    probabilities: List[float]     # aligned with labels
    evidence: float                # normalizing constant Z
    observations: Dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.labels, self.probabilities))

    def most_probable(self) -> Optional[str]:
        """Label with the highest posterior; the earliest label wins ties"""
        if not self.labels:
            return None
        return self.labels[int(np.argmax(self.probabilities))]


class InferenceEngine:
    """Validates a table, then computes posteriors from it"""

    def __init__(self, validator: Optional[Validator] = None):
        self.validator = validator or Validator()

    def posterior(self, table: ProbabilityTable,
                  observations: Mapping[str, str]) -> Posterior:
        """
        Compute the posterior distribution given observed feature states

        Args:
            table: Probability table to read; never modified
            observations: feature name -> observed state label

        Returns:
            Posterior with probabilities in class label order

        Raises:
            InconsistentModelError: the table does not validate
            NotFoundError: an observed feature or state is unknown
            DegenerateEvidenceError: the observations have zero evidence
        """
        self.validator.validate(table)

        # Resolve everything before doing any arithmetic
        rows = [table.conditional_row(feature, state) for feature, state in observations.items()]

        priors = table.priors
        likelihood = np.ones_like(priors)
        for row in rows:
            likelihood = likelihood * row

        joint = priors * likelihood
        evidence = accumulate(joint.tolist())
        if evidence == 0.0:
            raise DegenerateEvidenceError(
                f"Observations {dict(observations)!r} have zero probability under every class label",
                observations)

        probabilities = (joint / evidence).tolist()
        logger.debug(f"Posterior for {len(rows)} observed features: Z={evidence!r}")

        return Posterior(
            labels=table.get_labels(),
            probabilities=probabilities,
            evidence=evidence,
            observations=dict(observations)
        )

    def classify(self, table: ProbabilityTable,
                 observations: Mapping[str, str]) -> List[float]:
        """Posterior probabilities in class label order"""
        return self.posterior(table, observations).probabilities
