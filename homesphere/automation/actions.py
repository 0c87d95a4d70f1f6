"""
Device actions and their outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from homesphere.devices.base import Device
from homesphere.errors import FailureKind


@dataclass(frozen=True)
class DeviceAction:
    """
    One instruction: abstract command, string parameter, target device.

    The action references the device but does not own it; equality is by
    value (the device compares by id).
    """

    command: str  # e.g. "setTemperature"
    parameter: str  # e.g. "26.0"; ignored by parameterless commands, non-strings go through str()
    device: Device

    def describe(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "parameter": self.parameter,
            "device_id": self.device.device_id,
            "device_name": self.device.name,
        }


@dataclass(frozen=True)
class ActionOutcome:
    """Result of dispatching a single action."""

    action: DeviceAction
    success: bool
    reason: str
    failure: Optional[FailureKind] = None

    def to_dict(self) -> Dict[str, Any]:
        result = self.action.describe()
        result.update(
            success=self.success,
            reason=self.reason,
            error=self.failure.value if self.failure else None,
        )
        return result
