"""
Command dispatch and scene execution.
"""

from homesphere.automation.actions import ActionOutcome, DeviceAction
from homesphere.automation.commands import (
    DEFAULT_REGISTRY,
    CommandRegistry,
    CommandSpec,
    ParameterKind,
)
from homesphere.automation.dispatcher import ActionDispatcher
from homesphere.automation.scene import AutomationScene, SceneReport, SceneState

__all__ = [
    "DEFAULT_REGISTRY",
    "ActionDispatcher",
    "ActionOutcome",
    "AutomationScene",
    "CommandRegistry",
    "CommandSpec",
    "DeviceAction",
    "ParameterKind",
    "SceneReport",
    "SceneState",
]
