"""
Base device contract.

Every variant shares identity, naming, manufacturer, online/power flags and
an append-only running log.
"""

from __future__ import annotations

from typing import Optional, Tuple

from homesphere.devices.capabilities import PowerControl
from homesphere.devices.records import Manufacturer, RunningLog


class Device(PowerControl):
    """
    Base class for all smart devices.

    Devices start offline and powered off. Identity is the device id: two
    handles are equal iff their ids are equal, whatever their attributes.
    """

    # Short variant label used in listings and reports.
    kind = "device"

    def __init__(self, device_id: int, name: str, manufacturer: Optional[Manufacturer] = None):
        self._device_id = int(device_id)
        self.name = name
        self._manufacturer = manufacturer
        self._online = False
        self._power_status = False
        self._running_logs: list[RunningLog] = []

    @property
    def device_id(self) -> int:
        return self._device_id

    @property
    def manufacturer(self) -> Optional[Manufacturer]:
        return self._manufacturer

    @property
    def online(self) -> bool:
        return self._online

    def set_online(self, online: bool) -> None:
        """Online is reachability, managed independently of power."""
        self._online = bool(online)

    @property
    def power_status(self) -> bool:
        return self._power_status

    def power_on(self) -> None:
        # Does not bring the device online.
        self._power_status = True

    def power_off(self) -> None:
        # Power-off implies offline.
        self._power_status = False
        self._online = False

    @property
    def running_logs(self) -> Tuple[RunningLog, ...]:
        return tuple(self._running_logs)

    def add_running_log(self, entry: RunningLog) -> None:
        self._running_logs.append(entry)

    def describe(self) -> dict:
        """Flat summary used by listings and the demo CLI."""
        return {
            "device_id": self._device_id,
            "name": self.name,
            "kind": self.kind,
            "online": self._online,
            "power_status": self._power_status,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return self._device_id == other._device_id

    def __hash__(self) -> int:
        return hash(("device", self._device_id))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(device_id={self._device_id}, name={self.name!r}, "
            f"online={self._online}, power_status={self._power_status})"
        )
