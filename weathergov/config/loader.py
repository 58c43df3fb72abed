"""YAML config loader."""

from pathlib import Path

import yaml

from weathergov.config.schema import ClientConfig


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate client settings from a YAML file.

    An empty file yields the defaults. Unknown keys are rejected.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    return ClientConfig(**raw)
