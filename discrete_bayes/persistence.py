"""
YAML model files

A model file lists the class labels (with their priors) and the features
(with the conditional probability of every state given every label):

    labels:
      Flu: 0.06
      Measles: 0.04
      No disease: 0.90
    features:
      Fever:
        "yes": {Flu: 0.90, Measles: 0.90, No disease: 0.01}
        "no":  {Flu: 0.10, Measles: 0.10, No disease: 0.99}

`labels` may also be a plain list, leaving every prior at 1.0. Quote state
names such as "yes"/"no"/"on"/"off": YAML reads them as booleans otherwise.
Loading does not validate the model.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .classifier import NaiveBayesClassifier
from .core.config import Config
from .core.exceptions import ModelFormatError, NotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _name(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise ModelFormatError(
            f"{what} names must be strings, got {value!r} ({type(value).__name__}); "
            f"quote it in the model file")
    return value


def _probability(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ModelFormatError(f"Probability for {where} must be a number, got {value!r}")
    return float(value)


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ModelFormatError(f"{where} must be a mapping, got {type(value).__name__}")
    return value


def populate(classifier: NaiveBayesClassifier, data: Mapping[str, Any]) -> None:
    """Add the labels, features, states and probabilities described by data"""
    if not isinstance(data, Mapping):
        raise ModelFormatError(f"A model must be a mapping, got {type(data).__name__}")
    if 'labels' not in data:
        raise ModelFormatError("A model needs a 'labels' section")

    labels = data['labels']
    if isinstance(labels, list):
        for label in labels:
            classifier.add_label(_name(label, "Label"))
    else:
        for label, prior in _mapping(labels, "'labels'").items():
            classifier.add_label(_name(label, "Label"))
            if prior is not None:
                classifier.set_prior(label, _probability(prior, f"label {label!r}"))

    for feature, states in _mapping(data.get('features'), "'features'").items():
        classifier.add_feature(_name(feature, "Feature"))
        for state, conditionals in _mapping(states, f"feature {feature!r}").items():
            classifier.add_state(feature, _name(state, "State"))
            for label, probability in _mapping(conditionals, f"state {feature}={state}").items():
                where = f"{feature}={state} given {label!r}"
                try:
                    classifier.set_conditional(feature, state, _name(label, "Label"),
                                               _probability(probability, where))
                except NotFoundError as e:
                    raise ModelFormatError(f"Unknown label in {feature}={state}: {e}") from e


def load_model(path: PathLike, config: Optional[Config] = None,
               tolerance: Optional[float] = None) -> NaiveBayesClassifier:
    """Build a classifier from a YAML model file"""
    model_file = Path(path)
    try:
        with open(model_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ModelFormatError(f"Failed to load model from {model_file}: {e}") from e

    classifier = NaiveBayesClassifier.from_dict(data or {}, config=config, tolerance=tolerance)
    logger.info(f"Loaded model {model_file} "
                f"({len(classifier.get_labels())} labels, {len(classifier.get_features())} features)")
    return classifier


def dump_model(classifier: NaiveBayesClassifier, path: PathLike) -> None:
    """Write a classifier to a YAML model file"""
    model_file = Path(path)
    try:
        with open(model_file, 'w', encoding='utf-8') as f:
            yaml.safe_dump(classifier.to_dict(), f, sort_keys=False, allow_unicode=True)
    except OSError as e:
        raise ModelFormatError(f"Failed to write model to {model_file}: {e}") from e
    logger.info(f"Wrote model {model_file}")
