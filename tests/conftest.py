from __future__ import annotations

from pathlib import Path

import pytest

from discrete_bayes import NaiveBayesClassifier


DIAGNOSIS_YAML = """\
labels:
  Flu: 0.06
  Measles: 0.04
  No disease: 0.90
features:
  Fever:
    "yes": {Flu: 0.90, Measles: 0.90, No disease: 0.01}
    "no": {Flu: 0.10, Measles: 0.10, No disease: 0.99}
  Red spots:
    "yes": {Flu: 0.05, Measles: 0.90, No disease: 0.01}
    "no": {Flu: 0.95, Measles: 0.10, No disease: 0.99}
"""


def build_diagnosis(classifier: NaiveBayesClassifier) -> NaiveBayesClassifier:
    for label in ("Flu", "Measles", "No disease"):
        classifier.add_label(label)

    for feature in ("Fever", "Red spots"):
        classifier.add_feature(feature)
        classifier.add_state(feature, "yes")
        classifier.add_state(feature, "no")

    classifier.set_prior("Flu", 0.06)
    classifier.set_prior("Measles", 0.04)
    classifier.set_prior("No disease", 0.90)

    conditionals = {
        ("Fever", "yes"): (0.90, 0.90, 0.01),
        ("Fever", "no"): (0.10, 0.10, 0.99),
        ("Red spots", "yes"): (0.05, 0.90, 0.01),
        ("Red spots", "no"): (0.95, 0.10, 0.99),
    }
    for (feature, state), values in conditionals.items():
        for label, p in zip(("Flu", "Measles", "No disease"), values):
            classifier.set_conditional(feature, state, label, p)
    return classifier


@pytest.fixture
def diagnosis() -> NaiveBayesClassifier:
    """Flu / Measles / No disease observed through Fever and Red spots"""
    return build_diagnosis(NaiveBayesClassifier())


@pytest.fixture
def diagnosis_file(tmp_path: Path) -> Path:
    path = tmp_path / "diagnosis.yaml"
    path.write_text(DIAGNOSIS_YAML, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path: Path) -> None:
    # Keep config/*.yaml in the working directory and env overrides out of tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DISCRETE_BAYES_TOLERANCE", raising=False)
    monkeypatch.delenv("DISCRETE_BAYES_LOG_LEVEL", raising=False)
