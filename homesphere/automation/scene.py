"""
Automation scenes.

A scene is a named, ordered batch of device actions triggered on demand.
Triggering is best effort: every action runs, in insertion order, whatever
happened to the previous ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from homesphere.automation.actions import ActionOutcome, DeviceAction
from homesphere.automation.dispatcher import ActionDispatcher
from homesphere.hs_logging import get_logger


class SceneState(str, Enum):
    IDLE = "idle"
    EXECUTING = "executing"


@dataclass(frozen=True)
class SceneReport:
    """Per-action outcomes of one trigger, in execution order."""

    scene_id: int
    scene_name: str
    outcomes: Tuple[ActionOutcome, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> List[ActionOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failed(self) -> List[ActionOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scene_id": self.scene_id,
            "scene_name": self.scene_name,
            "succeeded": len(self.succeeded),
            "failed": len(self.failed),
            "outcomes": [o.to_dict() for o in self.outcomes],
        }


class AutomationScene:
    """
    Ordered collection of actions with identity and metadata.

    The scene id is fixed at creation; name and description may change.
    """

    def __init__(self, scene_id: int, name: str, description: str = ""):
        self._scene_id = int(scene_id)
        self.name = name
        self.description = description
        self._actions: List[DeviceAction] = []
        self._state = SceneState.IDLE

    @property
    def scene_id(self) -> int:
        return self._scene_id

    @property
    def state(self) -> SceneState:
        return self._state

    @property
    def actions(self) -> List[DeviceAction]:
        """Actions in execution order (a copy, empty when none were added)."""
        return list(self._actions)

    def add_action(self, action: DeviceAction) -> None:
        self._actions.append(action)

    def remove_action(self, action: DeviceAction) -> bool:
        """
        Remove an action by reference.

        Only the very object that was added is removed; an equal but distinct
        action is left alone.

        Returns:
            True if the action was found and removed
        """
        for index, existing in enumerate(self._actions):
            if existing is action:
                del self._actions[index]
                return True
        return False

    def trigger(self, dispatcher: Optional[ActionDispatcher] = None) -> SceneReport:
        """
        Run every action in order and report one outcome per action.

        Action failures are recorded in the report and never abort the run.
        """
        dispatcher = dispatcher or ActionDispatcher()
        log = get_logger("HOMESPHERE.Scene")

        log.info("HOMESPHERE.Scene.Triggered", extra={"fields": {
            "scene_id": self._scene_id,
            "name": self.name,
            "description": self.description,
            "action_count": len(self._actions),
        }})

        outcomes: List[ActionOutcome] = []
        self._state = SceneState.EXECUTING
        try:
            for action in list(self._actions):
                outcomes.append(dispatcher.execute(action))
        finally:
            self._state = SceneState.IDLE

        report = SceneReport(self._scene_id, self.name, tuple(outcomes))
        log.info("HOMESPHERE.Scene.Completed", extra={"fields": {
            "scene_id": self._scene_id,
            "succeeded": len(report.succeeded),
            "failed": len(report.failed),
        }})
        return report

    def __repr__(self) -> str:
        return (
            f"AutomationScene(scene_id={self._scene_id}, name={self.name!r}, "
            f"description={self.description!r}, actions={len(self._actions)})"
        )
