"""Energy accounting helpers.

Consumption is estimated as rated power times wall-clock time: the device is
assumed to run at its rated draw for the whole interval, whatever its actual
on/off history or brightness/temperature settings were.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

_WATT_SECONDS_PER_KWH = 3_600_000


@dataclass(frozen=True, slots=True)
class EnergyReading:
    device_id: int
    device_name: str
    kwh: float


def hours_between(start: datetime, end: datetime) -> float:
    """Signed number of hours from `start` to `end` (negative if reversed)."""
    return (end - start).total_seconds() / 3600


def interval_energy_kwh(rated_power_w: float, start: datetime, end: datetime) -> float:
    """Energy in kWh for `rated_power_w` sustained from `start` to `end`.

    Equivalent to ``(rated_power_w / 1000) * hours_between(start, end)`` but
    computed in a single division so that, e.g., 700 W over 24 h is exactly
    16.8 kWh. The result is negative when `start` is after `end`; callers
    that need strict ordering must check it themselves.
    """
    seconds = (end - start).total_seconds()
    return rated_power_w * seconds / _WATT_SECONDS_PER_KWH
