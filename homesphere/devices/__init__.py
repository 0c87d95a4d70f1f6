"""
Device capability model.

Base device contract, optional capability interfaces and concrete variants.
"""

from homesphere.devices.base import Device
from homesphere.devices.capabilities import (
    ColorTunable,
    Dimmable,
    EnergyReporting,
    Lockable,
    PowerControl,
    TemperatureControl,
    energy_reporting,
)
from homesphere.devices.records import LogType, Manufacturer, RunningLog
from homesphere.devices.variants import AirConditioner, BathroomScale, LightBulb, SmartLock

__all__ = [
    "AirConditioner",
    "BathroomScale",
    "ColorTunable",
    "Device",
    "Dimmable",
    "EnergyReporting",
    "LightBulb",
    "Lockable",
    "LogType",
    "Manufacturer",
    "PowerControl",
    "RunningLog",
    "SmartLock",
    "TemperatureControl",
    "energy_reporting",
]
