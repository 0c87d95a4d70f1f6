from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from homesphere.devices import AirConditioner, LightBulb
from homesphere.energy import hours_between, interval_energy_kwh

T0 = datetime(2024, 3, 1, 12, 0, 0)


@pytest.mark.parametrize("variant, rated", [(AirConditioner, 700.0), (LightBulb, 50.0)])
def test_current_power_is_rated_when_on_and_zero_when_off(variant, rated) -> None:
    device = variant(1, "dev")
    assert device.current_power() == 0

    device.power_on()
    assert device.current_power() == rated

    device.power_off()
    assert device.current_power() == 0


def test_settings_do_not_scale_power() -> None:
    light = LightBulb(2, "Kitchen Light")
    light.power_on()
    light.set_brightness(10)
    assert light.current_power() == 50.0

    ac = AirConditioner(1, "AC")
    ac.power_on()
    ac.set_target_temp(30.0)
    assert ac.current_power() == 700.0


def test_air_conditioner_over_a_day_is_exactly_16_8() -> None:
    ac = AirConditioner(1, "Living Room AC")
    ac.power_on()
    assert ac.energy_over_interval(T0, T0 + timedelta(hours=24)) == 16.8


def test_light_over_ten_hours() -> None:
    light = LightBulb(2, "Kitchen Light")
    assert light.energy_over_interval(T0, T0 + timedelta(hours=10)) == 0.5


@pytest.mark.parametrize("variant", [AirConditioner, LightBulb])
def test_zero_width_interval(variant) -> None:
    assert variant(1, "dev").energy_over_interval(T0, T0) == 0


@pytest.mark.parametrize("variant", [AirConditioner, LightBulb])
@pytest.mark.parametrize("delta", [timedelta(minutes=1), timedelta(hours=7, seconds=13), timedelta(days=3)])
def test_swapped_bounds_are_antisymmetric(variant, delta) -> None:
    device = variant(1, "dev")
    start, end = T0, T0 + delta
    forward = device.energy_over_interval(start, end)
    assert forward > 0
    assert device.energy_over_interval(end, start) == -forward


def test_interval_ignores_power_state() -> None:
    ac = AirConditioner(1, "AC")
    off = ac.energy_over_interval(T0, T0 + timedelta(hours=2))
    ac.power_on()
    assert ac.energy_over_interval(T0, T0 + timedelta(hours=2)) == off == 1.4


def test_hours_between() -> None:
    assert hours_between(T0, T0 + timedelta(minutes=90)) == 1.5
    assert hours_between(T0 + timedelta(minutes=90), T0) == -1.5


def test_interval_energy_with_aware_datetimes() -> None:
    start = datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert interval_energy_kwh(1000, start, start + timedelta(hours=3)) == 3.0


def test_mixing_naive_and_aware_datetimes_raises() -> None:
    with pytest.raises(TypeError):
        interval_energy_kwh(50, T0, datetime(2024, 3, 1, tzinfo=timezone.utc))
