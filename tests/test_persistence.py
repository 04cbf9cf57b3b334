from __future__ import annotations

from pathlib import Path

import pytest

from discrete_bayes import NaiveBayesClassifier, dump_model, load_model
from discrete_bayes.core.exceptions import DuplicateKeyError, ModelFormatError


def test_load_model_file(diagnosis_file: Path, diagnosis) -> None:
    loaded = load_model(diagnosis_file)

    assert loaded.get_labels() == ["Flu", "Measles", "No disease"]
    assert loaded.get_features() == ["Fever", "Red spots"]
    assert loaded.get_states("Red spots") == ["yes", "no"]
    assert loaded.to_dict() == diagnosis.to_dict()
    loaded.validate()


def test_dump_and_reload(tmp_path: Path, diagnosis) -> None:
    path = tmp_path / "out.yaml"
    dump_model(diagnosis, path)

    reloaded = load_model(path)
    assert reloaded.to_dict() == diagnosis.to_dict()
    assert reloaded.classify({"Fever": "yes"}) == diagnosis.classify({"Fever": "yes"})


def test_label_list_keeps_default_priors() -> None:
    c = NaiveBayesClassifier.from_dict({"labels": ["a", "b"]})
    assert c.get_priors() == [1.0, 1.0]
    assert c.get_features() == []


def test_missing_conditionals_keep_defaults() -> None:
    c = NaiveBayesClassifier.from_dict({
        "labels": {"a": 0.5, "b": 0.5},
        "features": {"f": {"x": {"a": 0.25}, "y": None}},
    })
    assert c.get_conditionals("f", "x") == [0.25, 1.0]
    assert c.get_conditionals("f", "y") == [1.0, 1.0]


def test_unquoted_boolean_state_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("labels: [a]\nfeatures:\n  f:\n    yes: {a: 1.0}\n", encoding="utf-8")
    with pytest.raises(ModelFormatError, match="quote"):
        load_model(path)


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"features": {}},
        {"labels": "Flu"},
        {"labels": ["a"], "features": ["f"]},
        {"labels": {"a": "high"}},
        {"labels": {"a": True}},
        {"labels": ["a"], "features": {"f": {"x": {"b": 1.0}}}},
    ],
)
def test_malformed_models_rejected(data) -> None:
    with pytest.raises(ModelFormatError):
        NaiveBayesClassifier.from_dict(data)


def test_duplicate_label_in_list() -> None:
    with pytest.raises(DuplicateKeyError):
        NaiveBayesClassifier.from_dict({"labels": ["a", "a"]})


def test_unreadable_files(tmp_path: Path) -> None:
    with pytest.raises(ModelFormatError):
        load_model(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("labels: [a\n", encoding="utf-8")
    with pytest.raises(ModelFormatError):
        load_model(broken)


def test_unwritable_path(tmp_path: Path, diagnosis) -> None:
    with pytest.raises(ModelFormatError):
        dump_model(diagnosis, tmp_path / "no-such-dir" / "out.yaml")
