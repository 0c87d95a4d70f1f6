"""
Household bookkeeping: rooms, users and scenes.

In-memory containers. Listings always return a (possibly empty) list copy.
"""

import hmac
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from homesphere.automation.scene import AutomationScene
from homesphere.devices.base import Device

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class User:
    user_id: int
    login_name: str
    login_password: str = field(repr=False)
    user_name: str = ""
    email: str = ""
    is_admin: bool = False

    def check_password(self, password: str) -> bool:
        return hmac.compare_digest(self.login_password.encode(), password.encode())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(("user", self.user_id))


class Room:
    """A room and the devices placed in it."""

    def __init__(self, room_id: int, name: str, area: float = 0.0):
        self._room_id = int(room_id)
        self.name = name
        self.area = float(area)  # m²
        self._devices: List[Device] = []

    @property
    def room_id(self) -> int:
        return self._room_id

    @property
    def devices(self) -> List[Device]:
        return list(self._devices)

    def add_device(self, device: Device) -> None:
        self._devices.append(device)

    def remove_device(self, device_id: int) -> int:
        """
        Remove every device with `device_id`.

        Returns:
            Number of devices removed
        """
        before = len(self._devices)
        self._devices = [d for d in self._devices if d.device_id != device_id]
        removed = before - len(self._devices)
        if removed:
            logger.info(f"Removed {removed} device(s) with id {device_id} from room {self._room_id}")
        else:
            logger.info(f"Device {device_id} not found in room {self._room_id}")
        return removed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self._room_id == other._room_id

    def __hash__(self) -> int:
        return hash(("room", self._room_id))

    def __repr__(self) -> str:
        return f"Room(room_id={self._room_id}, name={self.name!r}, area={self.area}, devices={self._devices!r})"


class Household:
    """
    A home: its address, users, rooms and automation scenes.
    """

    def __init__(self, household_id: int, address: str):
        self._household_id = int(household_id)
        self.address = address
        self._admin: Optional[User] = None
        self._users: List[User] = []
        self._rooms: List[Room] = []
        self._scenes: List[AutomationScene] = []

    @property
    def household_id(self) -> int:
        return self._household_id

    @property
    def admin(self) -> Optional[User]:
        return self._admin

    def set_admin(self, user: User) -> None:
        user.is_admin = True
        self._admin = user

    # Rooms

    @property
    def rooms(self) -> List[Room]:
        return list(self._rooms)

    def add_room(self, room: Room) -> None:
        self._rooms.append(room)

    def remove_room(self, room_id: int) -> bool:
        return self._remove_by(self._rooms, lambda r: r.room_id == room_id, f"room {room_id}")

    # Users

    @property
    def users(self) -> List[User]:
        return list(self._users)

    def add_user(self, user: User) -> None:
        self._users.append(user)

    def remove_user(self, user_id: int) -> bool:
        return self._remove_by(self._users, lambda u: u.user_id == user_id, f"user {user_id}")

    # Scenes

    @property
    def scenes(self) -> List[AutomationScene]:
        return list(self._scenes)

    def add_scene(self, scene: AutomationScene) -> None:
        self._scenes.append(scene)

    def remove_scene(self, scene_id: int) -> bool:
        return self._remove_by(self._scenes, lambda s: s.scene_id == scene_id, f"scene {scene_id}")

    def find_scene(self, scene_id: int) -> Optional[AutomationScene]:
        for scene in self._scenes:
            if scene.scene_id == scene_id:
                return scene
        return None

    def list_all_devices(self) -> List[Device]:
        """All devices across rooms, in room order then placement order."""
        devices: List[Device] = []
        for room in self._rooms:
            devices.extend(room.devices)
        return devices

    @staticmethod
    def _remove_by(items: list, predicate, label: str) -> bool:
        before = len(items)
        items[:] = [item for item in items if not predicate(item)]
        if len(items) < before:
            logger.info(f"Removed {label}")
            return True
        logger.info(f"{label} not found, nothing removed")
        return False
