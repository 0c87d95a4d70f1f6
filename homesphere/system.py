"""
HomeSphere system facade.

Ties a household to a logged-in user and exposes the host workflows:
login/registration, listings, energy reporting and manual scene triggers.
"""

import logging
from datetime import datetime
from typing import List, Optional

from homesphere.automation.dispatcher import ActionDispatcher
from homesphere.automation.scene import AutomationScene, SceneReport
from homesphere.devices.base import Device
from homesphere.devices.capabilities import energy_reporting
from homesphere.energy import EnergyReading
from homesphere.errors import SceneNotFoundError
from homesphere.household import Household, Room, User
from homesphere.hs_logging import get_logger

logger = logging.getLogger(__name__)


class HomeSphereSystem:
    """
    Entry point over one household.

    Listing methods emit one log line per item and return the items.
    """

    def __init__(self, household: Household, dispatcher: Optional[ActionDispatcher] = None):
        self.household = household
        self.dispatcher = dispatcher or ActionDispatcher()
        self._current_user: Optional[User] = None
        self._log = get_logger("HOMESPHERE.System")

    @property
    def current_user(self) -> Optional[User]:
        return self._current_user

    def login(self, login_name: str, login_password: str) -> bool:
        """
        Log in a household user.

        Returns:
            True on success; the current user is left unchanged otherwise
        """
        for user in self.household.users:
            if user.login_name == login_name and user.check_password(login_password):
                self._current_user = user
                self._log.info("HOMESPHERE.System.LoggedIn", extra={"fields": {"user_id": user.user_id}})
                return True

        self._log.warning("HOMESPHERE.System.LoginFailed", extra={"fields": {"login_name": login_name}})
        return False

    def logoff(self) -> None:
        if self._current_user is not None:
            self._log.info("HOMESPHERE.System.LoggedOff", extra={"fields": {
                "user_id": self._current_user.user_id
            }})
        self._current_user = None

    def register(self, login_name: str, login_password: str, user_name: str, email: str) -> User:
        """Create a user with id = last user id + 1 (1 for the first) and add it."""
        users = self.household.users
        new_id = users[-1].user_id + 1 if users else 1

        user = User(new_id, login_name, login_password, user_name, email)
        self.household.add_user(user)
        logger.info(f"Registered user {new_id} ({login_name})")
        return user

    def display_users(self) -> List[User]:
        users = self.household.users
        for user in users:
            self._log.info("HOMESPHERE.System.User", extra={"fields": {
                "user_id": user.user_id,
                "login_name": user.login_name,
                "user_name": user.user_name,
                "email": user.email,
                "is_admin": user.is_admin,
            }})
        return users

    def display_rooms(self) -> List[Room]:
        rooms = self.household.rooms
        for room in rooms:
            self._log.info("HOMESPHERE.System.Room", extra={"fields": {
                "room_id": room.room_id,
                "name": room.name,
                "area": room.area,
                "device_ids": [d.device_id for d in room.devices],
            }})
        return rooms

    def display_devices(self) -> List[Device]:
        devices = self.household.list_all_devices()
        for device in devices:
            self._log.info("HOMESPHERE.System.Device", extra={"fields": device.describe()})
        return devices

    def display_scenes(self) -> List[AutomationScene]:
        scenes = self.household.scenes
        for scene in scenes:
            self._log.info("HOMESPHERE.System.Scene", extra={"fields": {
                "scene_id": scene.scene_id,
                "name": scene.name,
                "description": scene.description,
                "actions": [a.describe() for a in scene.actions],
            }})
        return scenes

    def energy_report(self, start: datetime, end: datetime) -> List[EnergyReading]:
        """
        Energy consumed by every reporting-capable device between start and end.

        Devices without the EnergyReporting capability are skipped. Ordering
        of start/end is not checked (reversed bounds give negative values).
        """
        readings = []
        for device in self.household.list_all_devices():
            reporter = energy_reporting(device)
            if reporter is None:
                continue
            kwh = reporter.energy_over_interval(start, end)
            readings.append(EnergyReading(device.device_id, device.name, kwh))
            self._log.info("HOMESPHERE.System.Energy", extra={"fields": {
                "device_id": device.device_id,
                "device_name": device.name,
                "kwh": kwh,
            }})
        return readings

    def trigger_scene(self, scene_id: int) -> SceneReport:
        """
        Manually trigger a household scene.

        Raises:
            SceneNotFoundError: If the household has no scene with this id
        """
        scene = self.household.find_scene(scene_id)
        if scene is None:
            self._log.error("HOMESPHERE.System.SceneNotFound", extra={"fields": {"scene_id": scene_id}})
            raise SceneNotFoundError(scene_id)
        return scene.trigger(self.dispatcher)
