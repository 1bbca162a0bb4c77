from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from logger.filtered_logger import configure_logger


_LOG_CONFIG_FILE = Path(__file__).parent / "log.yaml"


def load_log_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load the log configuration that defines active channels."""
    config_file = Path(path) if path is not None else _LOG_CONFIG_FILE
    if not config_file.exists():
        raise FileNotFoundError(f"Missing log config: {config_file}")
    with config_file.open("r", encoding="utf-8") as stream:
        return yaml.safe_load(stream) or {}


def apply_log_config(path: str | Path | None = None) -> None:
    """Apply the log channel flags via the shared filtered logger."""
    config = load_log_config(path)
    channels: Dict[str, bool] = config.get("channels", {})
    configure_logger(
        extreme_debug=channels.get("global"),
        planner_debug=channels.get("planner"),
        gpu_debug=channels.get("gpu"),
    )
