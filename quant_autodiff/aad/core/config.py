# aad/core/config.py
"""
Runtime configuration for the AAD core.

A single process-wide default is used by every new Graph unless one is passed
explicitly:

    from quant_autodiff.aad.core.config import AADConfig, set_config
    set_config(AADConfig(check_finite=True))

Settings can also be read from a YAML file, either at the top level or under an
``aad:`` section:

    aad:
      check_finite: true
      skip_zero_adjoints: true
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AADConfig:
    """
    Attributes
    ----------
    check_finite : bool
        Count non-finite forward values as they are recorded and log a warning
        the first time one shows up on a graph.
    skip_zero_adjoints : bool
        During the reverse sweep, skip nodes whose adjoint is exactly zero, so
        an unused branch with an infinite partial leaves the inputs finite.
        Off by default: every node propagates and 0 * inf partials give NaN.
    """
    check_finite: bool = False
    skip_zero_adjoints: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AADConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown AAD config keys: {sorted(unknown)}")
        for key, val in data.items():
            if not isinstance(val, bool):
                raise ValueError(f"AAD config key '{key}' must be a boolean, got {val!r}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "AADConfig":
        try:
            with open(path, "r") as f:
                raw = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.error(f"Config file not found: {path}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML config {path}: {e}")
            raise
        if not isinstance(raw, dict):
            raise ValueError(f"AAD config in {path} must be a mapping")
        section = raw.get("aad", raw) or {}
        config = cls.from_dict(section)
        logger.info(f"Loaded AAD config from {path}: {config}")
        return config

    def with_overrides(self, **overrides: Any) -> "AADConfig":
        return replace(self, **overrides)


_default_config = AADConfig()


def get_config() -> AADConfig:
    """Return the process-wide default configuration."""
    return _default_config


def set_config(config: AADConfig) -> AADConfig:
    """Install a new process-wide default; returns the previous one."""
    global _default_config
    if not isinstance(config, AADConfig):
        raise TypeError(f"expected AADConfig, got {type(config)}")
    prev = _default_config
    _default_config = config
    return prev
