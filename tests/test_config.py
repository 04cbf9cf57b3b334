from __future__ import annotations

from pathlib import Path

import pytest

from discrete_bayes import Config, NaiveBayesClassifier
from discrete_bayes.core.exceptions import ConfigurationError


def test_defaults() -> None:
    config = Config()
    assert config.tolerance == 0.0
    assert config.get("logging.level") == "WARNING"
    assert config.get("missing.key", "fallback") == "fallback"


def test_file_merges_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("classifier:\n  tolerance: 1.0e-9\n", encoding="utf-8")

    config = Config(str(path))
    assert config.tolerance == 1e-9
    assert config.get("logging.format")


def test_environment_config_discovered(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "strict.yaml").write_text("logging:\n  level: DEBUG\n", encoding="utf-8")

    assert Config(environment="strict").get("logging.level") == "DEBUG"
    assert Config().get("logging.level") == "WARNING"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("DISCRETE_BAYES_TOLERANCE", "1e-12")
    monkeypatch.setenv("DISCRETE_BAYES_LOG_LEVEL", "INFO")

    config = Config()
    assert config.tolerance == 1e-12
    assert config.logging["level"] == "INFO"


@pytest.mark.parametrize("value", ["loose", "-1"])
def test_bad_tolerance(monkeypatch, value: str) -> None:
    monkeypatch.setenv("DISCRETE_BAYES_TOLERANCE", value)
    with pytest.raises(ConfigurationError):
        Config()


def test_missing_or_invalid_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        Config(str(tmp_path / "nope.yaml"))

    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_set_dot_path() -> None:
    config = Config()
    config.set("classifier.tolerance", "0.5")
    assert config.tolerance == 0.5
    config.set("extra.nested.value", 3)
    assert config.get("extra.nested.value") == 3


def test_classifier_uses_configured_tolerance() -> None:
    config = Config()
    config.set("classifier.tolerance", 1e-6)

    assert NaiveBayesClassifier(config).tolerance == 1e-6
    assert NaiveBayesClassifier(config, tolerance=0.0).tolerance == 0.0


@pytest.mark.parametrize("content", ["classifier:\n", "classifier: 0.5\n", "logging:\n", "logging: [INFO]\n"])
def test_non_mapping_sections_rejected(tmp_path: Path, content: str) -> None:
    path = tmp_path / "sections.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_null_logging_section_with_env_level(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("DISCRETE_BAYES_LOG_LEVEL", "DEBUG")
    path = tmp_path / "sections.yaml"
    path.write_text("logging:\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Config(str(path))
