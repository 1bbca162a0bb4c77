from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


_CONFIG_FILE = Path(__file__).parent / "planner.yaml"


def load_planner_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load the planner configuration: input size, transform steps and resolution request."""
    config_file = Path(path) if path is not None else _CONFIG_FILE
    if not config_file.exists():
        raise FileNotFoundError(f"Missing planner config: {config_file}")
    with config_file.open("r", encoding="utf-8") as stream:
        return yaml.safe_load(stream) or {}
