"""Run configuration loaded from a YAML or JSON file.

Example ``config.yaml``::

    example: example_1
    machines: 2
    log_level: INFO
    trace: false
    charts:
      dir: charts
      gantt: false
    sweep:
      enabled: false
      max_machines: 6
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from typing import Any, Dict

import yaml


@dataclass(frozen=True)
class RunConfig:
    """Settings for one CLI run."""

    example: str = "example_1"
    machines: int = 2
    log_level: str = "INFO"
    trace: bool = False
    charts_dir: str = "charts"
    gantt: bool = False
    sweep: bool = False
    sweep_max_machines: int = 6

    def with_overrides(self, **overrides: Any) -> "RunConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name, {})
    return value if isinstance(value, dict) else {}


def parse_config(cfg: Dict[str, Any]) -> RunConfig:
    """Turn a raw mapping into a ``RunConfig`` (missing keys -> defaults).

    Raises:
        ValueError: If ``machines`` or ``sweep.max_machines`` is not an
            integer.
    """
    charts_cfg = _section(cfg, "charts")
    sweep_cfg = _section(cfg, "sweep")
    defaults = RunConfig()
    try:
        machines = int(cfg.get("machines", defaults.machines))
        max_machines = int(sweep_cfg.get("max_machines", defaults.sweep_max_machines))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid machine count in config: {e}") from e
    return RunConfig(
        example=str(cfg.get("example", defaults.example)),
        machines=machines,
        log_level=str(cfg.get("log_level", defaults.log_level)),
        trace=bool(cfg.get("trace", defaults.trace)),
        charts_dir=str(charts_cfg.get("dir", defaults.charts_dir)),
        gantt=bool(charts_cfg.get("gantt", defaults.gantt)),
        sweep=bool(sweep_cfg.get("enabled", defaults.sweep)),
        sweep_max_machines=max_machines,
    )


def load_config(path: str) -> RunConfig:
    """Load a YAML (``.yml``/``.yaml``) or JSON config file."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    if path.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text) or {}
    else:
        cfg = json.loads(text)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return parse_config(cfg)
