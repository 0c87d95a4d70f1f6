"""
Reference household used by the demo CLI and tests.
"""

from homesphere.automation.actions import DeviceAction
from homesphere.automation.scene import AutomationScene
from homesphere.devices.records import Manufacturer
from homesphere.devices.variants import AirConditioner, BathroomScale, LightBulb, SmartLock
from homesphere.household import Household, Room, User


def build_demo_household() -> Household:
    household = Household(1, "127 Friendship West Road")

    ac_maker = Manufacturer(1, "AC Corp", "WiFi, ZigBee")
    light_maker = Manufacturer(2, "Light Inc", "WiFi")

    ac = AirConditioner(1, "Living Room AC", ac_maker)
    light = LightBulb(2, "Kitchen Light", light_maker)
    lock = SmartLock(3, "Front Door Lock", ac_maker)
    scale = BathroomScale(4, "Bathroom Scale", light_maker)
    for maker, device in ((ac_maker, ac), (light_maker, light), (ac_maker, lock), (light_maker, scale)):
        maker.add_device(device)

    ac.set_curr_temp(25.0)
    ac.set_target_temp(22.0)
    light.set_brightness(80)
    light.set_color_temp(4000)
    lock.lock()
    scale.set_body_mass(70.5)
    scale.set_battery_level(85)

    living_room = Room(1, "Living Room", 25.5)
    living_room.add_device(ac)
    living_room.add_device(light)
    bedroom = Room(2, "Bedroom", 18.0)
    bedroom.add_device(lock)
    household.add_room(living_room)
    household.add_room(bedroom)

    admin = User(1, "admin", "111111", "Administrator", "admin@example.org")
    household.add_user(admin)
    household.set_admin(admin)

    evening = AutomationScene(1, "Good night", "Lights off, comfortable temperature")
    evening.add_action(DeviceAction("powerOff", "", light))
    evening.add_action(DeviceAction("setTemperature", "26.0", ac))
    household.add_scene(evening)

    return household
