"""
Tests for the HomeSphere system facade over the demo household.
"""

from datetime import datetime, timedelta

import pytest

from homesphere.demo import build_demo_household
from homesphere.devices import AirConditioner, LightBulb
from homesphere.errors import SceneNotFoundError
from homesphere.system import HomeSphereSystem

END = datetime(2024, 3, 2, 12, 0, 0)
START = END - timedelta(hours=24)


@pytest.fixture
def system() -> HomeSphereSystem:
    return HomeSphereSystem(build_demo_household())


class TestSessions:
    def test_register_assigns_next_id(self, system):
        user = system.register("hxt", "123456", "Hang Xiaotian", "hxt@example.org")
        assert user.user_id == 2
        assert system.household.users[-1] == user

    def test_register_first_user(self):
        from homesphere.household import Household

        system = HomeSphereSystem(Household(9, "Empty"))
        assert system.register("first", "pw", "First", "f@example.org").user_id == 1

    def test_login_flow(self, system):
        system.register("hxt", "123456", "Hang Xiaotian", "hxt@example.org")

        assert not system.login("hxt", "111111")
        assert system.current_user is None

        assert system.login("hxt", "123456")
        assert system.current_user.login_name == "hxt"

        system.logoff()
        assert system.current_user is None

    def test_failed_login_keeps_current_user(self, system):
        assert system.login("admin", "111111")
        assert not system.login("ghost", "nope")
        assert system.current_user.login_name == "admin"


class TestListings:
    def test_display_methods_return_items(self, system):
        assert len(system.display_users()) == 1
        assert [r.name for r in system.display_rooms()] == ["Living Room", "Bedroom"]
        assert [d.device_id for d in system.display_devices()] == [1, 2, 3]
        assert [s.scene_id for s in system.display_scenes()] == [1]


class TestEnergyReport:
    def test_only_reporting_devices_are_listed(self, system):
        readings = system.energy_report(START, END)
        assert [r.device_name for r in readings] == ["Living Room AC", "Kitchen Light"]
        assert readings[0].kwh == 16.8
        assert readings[1].kwh == 1.2

    def test_report_matches_device_values(self, system):
        devices = {d.device_id: d for d in system.household.list_all_devices()}
        for reading in system.energy_report(START, END):
            device = devices[reading.device_id]
            assert isinstance(device, (AirConditioner, LightBulb))
            assert reading.kwh == device.energy_over_interval(START, END)

    def test_reversed_interval_is_negative(self, system):
        readings = system.energy_report(END, START)
        assert [r.kwh for r in readings] == [-16.8, -1.2]


class TestSceneTrigger:
    def test_trigger_demo_scene(self, system):
        report = system.trigger_scene(1)

        devices = {d.device_id: d for d in system.household.list_all_devices()}
        assert report.all_succeeded
        assert len(report.outcomes) == 2
        assert not devices[2].power_status
        assert not devices[2].online
        assert devices[1].target_temp == 26.0

    def test_unknown_scene(self, system):
        with pytest.raises(SceneNotFoundError) as excinfo:
            system.trigger_scene(42)
        assert excinfo.value.scene_id == 42
        assert isinstance(excinfo.value, LookupError)
