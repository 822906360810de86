import logging

import pytest

from sudokuprep.io.config import PreprocessorConfig, config_from_mapping, configure_logging, load_config


def test_defaults():
    config = PreprocessorConfig()
    assert config.validate_input is True
    assert config.domain_strategy == "trial"
    assert config.hidden_single_scope == "peers"
    assert config.log_level == "WARNING"


def test_load_config(tmp_path):
    path = tmp_path / "prep.yaml"
    path.write_text("domain_strategy: peers\nhidden_single_scope: unit\nlog_level: debug\n", encoding="utf-8")
    config = load_config(path)
    assert config.domain_strategy == "peers"
    assert config.hidden_single_scope == "unit"
    assert config.log_level == "DEBUG"


def test_load_nested_config(tmp_path):
    path = tmp_path / "prep.yaml"
    path.write_text("preprocessor:\n  validate_input: false\nsearch:\n  population: 100\n", encoding="utf-8")
    config = load_config(path)
    assert config.validate_input is False
    assert config.domain_strategy == "trial"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == PreprocessorConfig()


def test_rejects_bad_values(tmp_path):
    with pytest.raises(ValueError):
        config_from_mapping({"domain_strategy": "guess"})
    with pytest.raises(ValueError):
        config_from_mapping({"hidden_single_scope": "everywhere"})
    with pytest.raises(ValueError):
        config_from_mapping({"log_level": "loud"})
    path = tmp_path / "list.yaml"
    path.write_text("- trial\n- peers\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_configure_logging():
    logger = logging.getLogger("sudokuprep")
    previous = logger.level
    try:
        configure_logging(PreprocessorConfig(log_level="info"))
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(previous)
