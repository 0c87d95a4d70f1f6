"""
HomeSphere: home-automation hub with command dispatch and scene execution.
"""

from homesphere.automation import (
    ActionDispatcher,
    ActionOutcome,
    AutomationScene,
    DeviceAction,
    SceneReport,
)
from homesphere.household import Household, Room, User
from homesphere.system import HomeSphereSystem

__all__ = [
    "ActionDispatcher",
    "ActionOutcome",
    "AutomationScene",
    "DeviceAction",
    "HomeSphereSystem",
    "Household",
    "Room",
    "SceneReport",
    "User",
]
