"""
Plain records shared by devices: manufacturers and running logs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from homesphere.devices.base import Device


class LogType(Enum):
    INFO = 0
    WARNING = 1
    ERROR = 2

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> "LogType":
        return cls(code)


@dataclass(frozen=True)
class RunningLog:
    """One entry in a device's append-only operation history."""

    date_time: datetime
    event: str
    type: LogType = LogType.INFO
    note: str = ""


@dataclass(eq=False)
class Manufacturer:
    """
    Device manufacturer.

    Keeps the list of devices it made; the list is bookkeeping only and is
    never consulted by command dispatch.
    """

    manufacturer_id: int
    name: str
    protocols: str = ""  # e.g. "WiFi, ZigBee"
    _devices: List["Device"] = field(default_factory=list, init=False, repr=False)

    @property
    def devices(self) -> List["Device"]:
        return list(self._devices)

    def add_device(self, device: "Device") -> None:
        self._devices.append(device)

    def remove_device(self, device: "Device") -> bool:
        """
        Remove a device (matched by device id).

        Returns:
            True if the device was found and removed
        """
        try:
            self._devices.remove(device)
        except ValueError:
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Manufacturer):
            return NotImplemented
        return self.manufacturer_id == other.manufacturer_id

    def __hash__(self) -> int:
        return hash(("manufacturer", self.manufacturer_id))
