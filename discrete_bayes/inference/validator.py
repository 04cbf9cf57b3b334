"""
Consistency checks run before inference

A table is consistent when its priors sum to 1.0 and, for every feature and
every class label, the conditionals of the feature's states sum to 1.0.
"""

import logging
import math
from typing import Iterable

from ..core.exceptions import ConfigurationError, InconsistentModelError
from ..model.table import ProbabilityTable

logger = logging.getLogger(__name__)


def accumulate(values: Iterable[float]) -> float:
    """Left-to-right float sum starting from 0.0

    Exact comparison against 1.0 depends on the accumulation order, so every
    sum in validation and inference goes through here.
    """
    total = 0.0
    for value in values:
        total += value
    return total


class Validator:
    """
    Checks that priors and conditionals form probability distributions

    tolerance=0.0 compares sums to 1.0 with exact float equality. A positive
    tolerance accepts any sum within that distance of 1.0.
    """

    def __init__(self, tolerance: float = 0.0):
        if not tolerance >= 0.0:
            raise ConfigurationError(f"tolerance must be >= 0, got {tolerance}")
        self.tolerance = float(tolerance)

    def is_unit(self, total: float) -> bool:
        if total == 1.0:
            return True
        return self.tolerance > 0.0 and math.fabs(total - 1.0) <= self.tolerance

    def validate(self, table: ProbabilityTable) -> None:
        """Raise InconsistentModelError on the first sum that is not 1.0"""
        prior_sum = accumulate(table.priors.tolist())
        if not self.is_unit(prior_sum):
            logger.debug(f"Prior sum {prior_sum!r} rejected")
            raise InconsistentModelError(
                f"The sum of prior probabilities is {prior_sum!r} (should be 1.0)",
                total=prior_sum)

        labels = table.get_labels()
        for feature, block in table.feature_blocks():
            for column, label in enumerate(labels):
                conditional_sum = accumulate(block[:, column].tolist())
                if not self.is_unit(conditional_sum):
                    logger.debug(f"Conditional sum {conditional_sum!r} of {feature!r} "
                                 f"given {label!r} rejected")
                    raise InconsistentModelError(
                        f"The sum of conditional probabilities of {feature} given {label} "
                        f"is {conditional_sum!r} (should be 1.0)",
                        total=conditional_sum, feature=feature, label=label)
