"""
Hub configuration from HOMESPHERE_* environment variables.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from homesphere.errors import ConfigError

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class HubConfig:
    log_level: str = "INFO"
    demo_scene_id: int = 1
    report_hours: float = 24.0


def load_hub_config() -> HubConfig:
    log_level = os.environ.get("HOMESPHERE_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if log_level not in _LEVELS:
        raise ConfigError(f"Unsupported HOMESPHERE_LOG_LEVEL: {log_level!r}")

    scene_s = os.environ.get("HOMESPHERE_DEMO_SCENE_ID", "1").strip() or "1"
    try:
        demo_scene_id = int(scene_s)
    except ValueError:
        raise ConfigError(f"HOMESPHERE_DEMO_SCENE_ID must be an integer, got {scene_s!r}") from None

    hours_s = os.environ.get("HOMESPHERE_REPORT_HOURS", "24").strip() or "24"
    try:
        report_hours = float(hours_s)
    except ValueError:
        report_hours = 24.0
    if not math.isfinite(report_hours) or report_hours <= 0:
        report_hours = 24.0

    return HubConfig(
        log_level=log_level,
        demo_scene_id=demo_scene_id,
        report_hours=report_hours,
    )

