"""
Probability table for a discrete Naive Bayes classifier

Holds class labels, features with their states, the prior of every label and
the conditional probability P(state | label) of every feature state.

All probabilities live in a single float64 matrix with one column per class
label. Row 0 is the prior vector, every other row is the conditional vector
of one (feature, state) pair:

                 label_0   label_1   ...
    priors       p(l0)     p(l1)
    Fever=yes    p(y|l0)   p(y|l1)
    Fever=no     p(n|l0)   p(n|l1)

Adding or removing a class label therefore adds or deletes exactly one column,
so every vector in the table stays aligned with the label order.
"""

import bisect
import itertools
import logging
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from ..core.exceptions import DuplicateKeyError, NotFoundError

logger = logging.getLogger(__name__)

# Fill value for new labels and states; callers normalize before inference
DEFAULT_PROBABILITY = 1.0


def _readonly(array: NDArray[np.float64]) -> NDArray[np.float64]:
    view = array.view()
    view.flags.writeable = False
    return view


class ProbabilityTable:
    """
    Mutable table of priors and conditional probabilities

    Class labels get a stable integer identifier when added. Identifiers are
    never reused, so a removed and re-added label is a new label.
    """

    PRIOR_ROW = 0

    def __init__(self) -> None:
        self._ids = itertools.count()
        self._labels: Dict[str, int] = {}        # label name -> stable id, in label order
        self._columns: Dict[int, int] = {}       # stable id -> matrix column
        self._features: Dict[str, Dict[str, int]] = {}  # feature -> state -> matrix row
        self._values: NDArray[np.float64] = np.ones((1, 0), dtype=np.float64)

    def __repr__(self) -> str:
        return (f"ProbabilityTable(labels={len(self._labels)}, "
                f"features={len(self._features)}, rows={self._values.shape[0]})")

    # ------------------------------------------------------------------
    # Class labels
    # ------------------------------------------------------------------

    def add_label(self, name: str) -> None:
        """Append a class label with prior 1.0 and conditional 1.0 in every state"""
        if name in self._labels:
            raise DuplicateKeyError(f'Label already exists ("{name}")')

        column = np.full((self._values.shape[0], 1), DEFAULT_PROBABILITY)
        self._values = np.hstack([self._values, column])
        self._labels[name] = next(self._ids)
        self._reindex_columns()
        logger.debug(f"Added label {name!r} (id={self._labels[name]})")

    def remove_label(self, name: str) -> None:
        """Remove a class label, its prior and its entry in every conditional vector"""
        column = self._column(name)

        self._values = np.delete(self._values, column, axis=1)
        del self._labels[name]
        self._reindex_columns()
        logger.debug(f"Removed label {name!r} (column {column})")

    def has_label(self, name: str) -> bool:
        return name in self._labels

    def label_id(self, name: str) -> int:
        """Stable identifier assigned to the label when it was added"""
        try:
            return self._labels[name]
        except KeyError:
            raise NotFoundError(f'Label does not exist ("{name}")') from None

    @property
    def label_count(self) -> int:
        return len(self._labels)

    def get_labels(self) -> List[str]:
        return list(self._labels)

    # ------------------------------------------------------------------
    # Features and states
    # ------------------------------------------------------------------

    def add_feature(self, name: str) -> None:
        """Create a feature without states"""
        if name in self._features:
            raise DuplicateKeyError(f'Feature already exists ("{name}")')

        self._features[name] = {}
        logger.debug(f"Added feature {name!r}")

    def remove_feature(self, name: str) -> None:
        """Delete a feature together with all of its states"""
        states = self._states(name)

        rows = list(states.values())
        del self._features[name]
        self._drop_rows(rows)
        logger.debug(f"Removed feature {name!r} ({len(rows)} states)")

    def has_feature(self, name: str) -> bool:
        return name in self._features

    def get_features(self) -> List[str]:
        return list(self._features)

    def add_state(self, feature: str, state: str) -> None:
        """Add a state whose conditional is 1.0 for every current label"""
        states = self._states(feature)
        if state in states:
            raise DuplicateKeyError(f'State already exists ("{state}")')

        row = np.full((1, self._values.shape[1]), DEFAULT_PROBABILITY)
        self._values = np.vstack([self._values, row])
        states[state] = self._values.shape[0] - 1
        logger.debug(f"Added state {state!r} to feature {feature!r}")

    def remove_state(self, feature: str, state: str) -> None:
        row = self._row(feature, state)

        del self._features[feature][state]
        self._drop_rows([row])
        logger.debug(f"Removed state {state!r} from feature {feature!r}")

    def has_state(self, feature: str, state: str) -> bool:
        return state in self._features.get(feature, {})

    def get_states(self, feature: str) -> List[str]:
        return list(self._states(feature))

    # ------------------------------------------------------------------
    # Probabilities
    # ------------------------------------------------------------------

    def set_prior(self, label: str, probability: float) -> None:
        column = self._column(label)
        value = float(probability)

        self._values[self.PRIOR_ROW, column] = value

    def set_conditional(self, feature: str, state: str, label: str,
                        probability: float) -> None:
        """Set P(feature=state | label)"""
        row = self._row(feature, state)
        column = self._column(label)
        value = float(probability)

        self._values[row, column] = value

    def get_priors(self) -> List[float]:
        return self._values[self.PRIOR_ROW].tolist()

    def get_conditionals(self, feature: str, state: str) -> List[float]:
        return self._values[self._row(feature, state)].tolist()

    # ------------------------------------------------------------------
    # Read-only access for validation and inference
    # ------------------------------------------------------------------

    @property
    def priors(self) -> NDArray[np.float64]:
        """Read-only view of the prior vector, in label order"""
        return _readonly(self._values[self.PRIOR_ROW])

    def conditional_row(self, feature: str, state: str) -> NDArray[np.float64]:
        """Read-only view of P(feature=state | label) for every label"""
        return _readonly(self._values[self._row(feature, state)])

    def feature_blocks(self) -> Iterator[Tuple[str, NDArray[np.float64]]]:
        """
        Yield (feature, block) in feature order

        block has one row per state of the feature (state order) and one
        column per class label (label order).
        """
        for feature, states in self._features.items():
            rows = np.fromiter(states.values(), dtype=np.intp, count=len(states))
            yield feature, _readonly(self._values[rows])

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _column(self, label: str) -> int:
        return self._columns[self.label_id(label)]

    def _states(self, feature: str) -> Dict[str, int]:
        try:
            return self._features[feature]
        except KeyError:
            raise NotFoundError(f'Feature does not exist ("{feature}")') from None

    def _row(self, feature: str, state: str) -> int:
        states = self._states(feature)
        try:
            return states[state]
        except KeyError:
            raise NotFoundError(f'State does not exist ("{state}")') from None

    def _reindex_columns(self) -> None:
        self._columns = {label_id: column for column, label_id in enumerate(self._labels.values())}

    def _drop_rows(self, rows: Sequence[int]) -> None:
        """Delete matrix rows that are no longer referenced and compact the row map"""
        if not rows:
            return
        removed = sorted(rows)
        self._values = np.delete(self._values, removed, axis=0)
        for states in self._features.values():
            for state, row in states.items():
                states[state] = row - bisect.bisect_left(removed, row)
