from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..core.constraints import HIDDEN_SINGLE_SCOPES
from ..core.domains import DOMAIN_STRATEGIES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PreprocessorConfig:
    validate_input: bool = True
    domain_strategy: str = "trial"
    hidden_single_scope: str = "peers"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.domain_strategy not in DOMAIN_STRATEGIES:
            raise ValueError(f"unknown domain_strategy {self.domain_strategy!r}, "
                             f"expected one of {sorted(DOMAIN_STRATEGIES)}")
        if self.hidden_single_scope not in HIDDEN_SINGLE_SCOPES:
            raise ValueError(f"unknown hidden_single_scope {self.hidden_single_scope!r}, "
                             f"expected one of {sorted(HIDDEN_SINGLE_SCOPES)}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"unknown log_level {self.log_level!r}")
        self.validate_input = bool(self.validate_input)


def config_from_mapping(data: Mapping[str, Any] | None) -> PreprocessorConfig:
    """Build a config from a plain mapping, ignoring unrelated keys."""
    data = dict(data or {})
    if isinstance(data.get("preprocessor"), Mapping):
        data = dict(data["preprocessor"])
    known = {f.name for f in fields(PreprocessorConfig)}
    return PreprocessorConfig(**{k: v for k, v in data.items() if k in known})


def load_config(path: str | Path) -> PreprocessorConfig:
    """Load preprocessor settings from a YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, Mapping):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return config_from_mapping(data)


def configure_logging(config: PreprocessorConfig) -> None:
    logging.getLogger("sudokuprep").setLevel(config.log_level)
