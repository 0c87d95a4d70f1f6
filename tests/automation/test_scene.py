"""
Tests for scene execution.
"""

import json
import logging

import pytest

from homesphere.automation import ActionDispatcher, AutomationScene, DeviceAction, SceneState
from homesphere.devices import AirConditioner, BathroomScale, LightBulb
from homesphere.errors import FailureKind
from homesphere.hs_logging import ROOT_LOGGER


@pytest.fixture
def light() -> LightBulb:
    device = LightBulb(2, "Kitchen Light")
    device.power_on()
    device.set_online(True)
    return device


@pytest.fixture
def ac() -> AirConditioner:
    device = AirConditioner(1, "Living Room AC")
    device.set_target_temp(22.0)
    return device


@pytest.fixture
def evening(light, ac) -> AutomationScene:
    scene = AutomationScene(1, "Good night", "Lights off, comfortable temperature")
    scene.add_action(DeviceAction("powerOff", "", light))
    scene.add_action(DeviceAction("setTemperature", "26.0", ac))
    return scene


class TestSceneBasics:
    def test_attributes(self, evening):
        assert evening.scene_id == 1
        assert evening.name == "Good night"
        assert evening.description == "Lights off, comfortable temperature"
        assert len(evening.actions) == 2
        assert evening.state is SceneState.IDLE

    def test_empty_scene_lists_no_actions(self):
        scene = AutomationScene(2, "Empty")
        assert scene.actions == []

    def test_actions_returns_copy(self, evening):
        evening.actions.clear()
        assert len(evening.actions) == 2

    def test_scene_id_is_read_only(self, evening):
        with pytest.raises(AttributeError):
            evening.scene_id = 5

    def test_remove_action_by_reference(self, light):
        scene = AutomationScene(3, "Test")
        first = DeviceAction("powerOff", "", light)
        twin = DeviceAction("powerOff", "", light)
        scene.add_action(first)

        assert first == twin
        assert not scene.remove_action(twin)
        assert scene.remove_action(first)
        assert scene.actions == []
        assert not scene.remove_action(first)


class TestTrigger:
    def test_reference_scenario(self, evening, light, ac):
        report = evening.trigger()

        assert not light.power_status
        assert not light.online
        assert ac.target_temp == 26.0
        assert [o.success for o in report.outcomes] == [True, True]
        assert [o.action.command for o in report.outcomes] == ["powerOff", "setTemperature"]
        assert report.all_succeeded
        assert report.scene_id == 1

    def test_failure_does_not_stop_following_actions(self, ac, light):
        scale = BathroomScale(4, "Bathroom Scale")
        scene = AutomationScene(5, "Mixed")
        scene.add_action(DeviceAction("setTemperature", "19", ac))
        scene.add_action(DeviceAction("setTemperature", "abc", ac))
        scene.add_action(DeviceAction("explode", "1", ac))
        scene.add_action(DeviceAction("setTemperature", "30", scale))
        scene.add_action(DeviceAction("powerOff", "", light))

        report = scene.trigger()

        assert len(report.outcomes) == 5
        assert [o.failure for o in report.outcomes] == [
            None,
            FailureKind.PARAMETER_FORMAT,
            FailureKind.UNREGISTERED_COMMAND,
            FailureKind.CAPABILITY_MISMATCH,
            None,
        ]
        assert ac.target_temp == 19.0
        assert not light.power_status
        assert len(report.succeeded) == 2
        assert len(report.failed) == 3
        assert not report.all_succeeded

    def test_actions_run_in_insertion_order(self, ac):
        scene = AutomationScene(6, "Ramp")
        for value in ("18", "20", "23"):
            scene.add_action(DeviceAction("setTemperature", value, ac))

        scene.trigger()

        assert ac.target_temp == 23.0

    def test_trigger_does_not_mutate_scene(self, evening):
        before = evening.actions
        evening.trigger()
        assert evening.actions == before
        assert evening.state is SceneState.IDLE

    def test_trigger_is_repeatable(self, evening, ac):
        first = evening.trigger()
        ac.set_target_temp(10.0)
        second = evening.trigger()
        assert len(first.outcomes) == len(second.outcomes) == 2
        assert ac.target_temp == 26.0

    def test_empty_scene_report(self):
        report = AutomationScene(7, "Nothing").trigger()
        assert report.outcomes == ()
        assert report.all_succeeded

    def test_state_is_executing_during_trigger(self, ac):
        seen = []

        class SpyDispatcher(ActionDispatcher):
            def execute(self, action):
                seen.append(scene.state)
                return super().execute(action)

        scene = AutomationScene(8, "Spy")
        scene.add_action(DeviceAction("setTemperature", "21", ac))
        scene.trigger(SpyDispatcher())

        assert seen == [SceneState.EXECUTING]
        assert scene.state is SceneState.IDLE

    def test_report_to_dict(self, evening):
        data = evening.trigger().to_dict()
        assert data["scene_id"] == 1
        assert data["succeeded"] == 2
        assert data["failed"] == 0
        assert [o["command"] for o in data["outcomes"]] == ["powerOff", "setTemperature"]


class TestTriggerLogging:
    @pytest.fixture(autouse=True)
    def _info_level(self):
        root = logging.getLogger(ROOT_LOGGER)
        previous = root.level
        root.setLevel(logging.INFO)
        yield
        root.setLevel(previous)

    @staticmethod
    def _events(capsys) -> list:
        out = capsys.readouterr().out
        return [json.loads(line) for line in out.splitlines() if line.startswith("{")]

    def test_triggered_and_completed_events(self, evening, capsys):
        evening.trigger()
        events = self._events(capsys)
        messages = [e["msg"] for e in events]

        assert messages[0] == "HOMESPHERE.Scene.Triggered"
        assert messages[-1] == "HOMESPHERE.Scene.Completed"
        assert messages.count("HOMESPHERE.Dispatch.Executing") == 2

        triggered = events[0]
        assert triggered["scene_id"] == 1
        assert triggered["name"] == "Good night"
        assert triggered["description"] == "Lights off, comfortable temperature"
        assert triggered["action_count"] == 2

        completed = events[-1]
        assert completed["succeeded"] == 2
        assert completed["failed"] == 0

    def test_failing_action_logged_with_error_and_reason(self, ac, capsys):
        scene = AutomationScene(9, "Broken")
        scene.add_action(DeviceAction("setTemperature", "abc", ac))
        scene.add_action(DeviceAction("setTemperature", "21", ac))

        scene.trigger()
        events = self._events(capsys)

        failed = [e for e in events if e["msg"] == "HOMESPHERE.Dispatch.Failed"]
        assert len(failed) == 1
        assert failed[0]["error"] == "parameter_format"
        assert failed[0]["parameter"] == "abc"
        assert "'abc'" in failed[0]["reason"]
        assert events[-1]["failed"] == 1
