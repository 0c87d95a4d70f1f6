"""
Concrete device variants.

The set is closed: AirConditioner, LightBulb, SmartLock, BathroomScale.
"""

from __future__ import annotations

from typing import Optional

from homesphere.devices.base import Device
from homesphere.devices.capabilities import (
    ColorTunable,
    Dimmable,
    EnergyReporting,
    Lockable,
    TemperatureControl,
)
from homesphere.devices.records import Manufacturer


class AirConditioner(Device, TemperatureControl, EnergyReporting):
    """Climate-control unit. Temperatures are in °C."""

    kind = "air_conditioner"
    RATED_POWER_W = 700.0

    def __init__(self, device_id: int, name: str, manufacturer: Optional[Manufacturer] = None):
        super().__init__(device_id, name, manufacturer)
        self.curr_temp = 0.0
        self.target_temp = 0.0

    def set_curr_temp(self, curr_temp: float) -> None:
        self.curr_temp = float(curr_temp)

    def set_target_temp(self, target_temp: float) -> None:
        self.target_temp = float(target_temp)

    def describe(self) -> dict:
        info = super().describe()
        info.update(curr_temp=self.curr_temp, target_temp=self.target_temp)
        return info


class LightBulb(Device, Dimmable, ColorTunable, EnergyReporting):
    """
    Luminaire.

    Brightness is nominally 0-100 and colour temperature is in kelvin
    (2700 warm to 6500 cold); neither is clamped here and neither changes the
    reported power draw.
    """

    kind = "light_bulb"
    RATED_POWER_W = 50.0

    def __init__(self, device_id: int, name: str, manufacturer: Optional[Manufacturer] = None):
        super().__init__(device_id, name, manufacturer)
        self.brightness = 0
        self.color_temp = 0

    def set_brightness(self, brightness: int) -> None:
        self.brightness = int(brightness)

    def set_color_temp(self, color_temp: int) -> None:
        self.color_temp = int(color_temp)

    def describe(self) -> dict:
        info = super().describe()
        info.update(brightness=self.brightness, color_temp=self.color_temp)
        return info


class SmartLock(Device, Lockable):
    kind = "smart_lock"

    def __init__(self, device_id: int, name: str, manufacturer: Optional[Manufacturer] = None):
        super().__init__(device_id, name, manufacturer)
        self.locked = False
        self.battery_level = 0  # percent

    def lock(self) -> None:
        self.locked = True

    def unlock(self) -> None:
        self.locked = False

    def set_locked(self, locked: bool) -> None:
        self.locked = bool(locked)

    def set_battery_level(self, battery_level: int) -> None:
        self.battery_level = int(battery_level)

    def describe(self) -> dict:
        info = super().describe()
        info.update(locked=self.locked, battery_level=self.battery_level)
        return info


class BathroomScale(Device):
    kind = "bathroom_scale"

    def __init__(self, device_id: int, name: str, manufacturer: Optional[Manufacturer] = None):
        super().__init__(device_id, name, manufacturer)
        self.body_mass = 0.0  # kg
        self.battery_level = 0  # percent

    def set_body_mass(self, body_mass: float) -> None:
        self.body_mass = float(body_mass)

    def set_battery_level(self, battery_level: int) -> None:
        self.battery_level = int(battery_level)

    def describe(self) -> dict:
        info = super().describe()
        info.update(body_mass=self.body_mass, battery_level=self.battery_level)
        return info
