"""
Capability interfaces for device variants.

A capability is an optional contract that only some variants implement.
Command dispatch checks the capability a command needs against the target
device, and reporting workflows query EnergyReporting through
energy_reporting() instead of inspecting concrete types.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from homesphere.energy import interval_energy_kwh


class PowerControl(ABC):
    """Power switching. Every device implements it."""

    @abstractmethod
    def power_on(self) -> None:
        ...

    @abstractmethod
    def power_off(self) -> None:
        ...


class TemperatureControl(ABC):
    @abstractmethod
    def set_target_temp(self, target_temp: float) -> None:
        ...


class Dimmable(ABC):
    @abstractmethod
    def set_brightness(self, brightness: int) -> None:
        ...


class ColorTunable(ABC):
    @abstractmethod
    def set_color_temp(self, color_temp: int) -> None:
        ...


class Lockable(ABC):
    @abstractmethod
    def lock(self) -> None:
        ...

    @abstractmethod
    def unlock(self) -> None:
        ...


class EnergyReporting(ABC):
    """
    Power draw and interval energy reporting.

    Implementers define RATED_POWER_W (watts) and expose `power_status`.
    Reported power is either the rated constant or zero; there are no
    intermediate power states.
    """

    RATED_POWER_W: float

    power_status: bool

    def current_power(self) -> float:
        """Current draw in watts: rated power when on, 0 when off."""
        return float(self.RATED_POWER_W) if self.power_status else 0.0

    def energy_over_interval(self, start: datetime, end: datetime) -> float:
        """
        Energy consumed between `start` and `end` in kWh.

        Assumes the device ran at rated power for the whole interval. The
        result is negative if `start` is after `end`.
        """
        return interval_energy_kwh(self.RATED_POWER_W, start, end)


def energy_reporting(device: object) -> Optional[EnergyReporting]:
    """Return `device` as an EnergyReporting handle, or None if unsupported."""
    if isinstance(device, EnergyReporting):
        return device
    return None
