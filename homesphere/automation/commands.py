"""
Command registry.

Maps the abstract command vocabulary used by scenes ("setTemperature",
"powerOff", ...) to a typed command variant, the capability a target device
must implement, and the shape of the single string parameter.

The table is explicit: a new command needs a new CommandSpec. Commands with
no entry are reported as unregistered by the dispatcher.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Type, Union

from homesphere.devices.capabilities import (
    ColorTunable,
    Dimmable,
    Lockable,
    PowerControl,
    TemperatureControl,
)
from homesphere.errors import ParameterFormatError, UnregisteredCommandError


# Plain decimal with optional exponent: no underscores, no nan/inf spellings.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class ParameterKind(str, Enum):
    NONE = "none"  # parameter string is ignored
    NUMBER = "number"  # finite float
    INTEGER = "integer"  # number with an integral value


# Command variants. Each carries its typed parameter and applies itself to a
# device that implements the matching capability.


@dataclass(frozen=True)
class PowerOn:
    def apply(self, device: PowerControl) -> None:
        device.power_on()


@dataclass(frozen=True)
class PowerOff:
    def apply(self, device: PowerControl) -> None:
        device.power_off()


@dataclass(frozen=True)
class SetTemperature:
    value: float

    def apply(self, device: TemperatureControl) -> None:
        device.set_target_temp(self.value)


@dataclass(frozen=True)
class SetBrightness:
    value: int

    def apply(self, device: Dimmable) -> None:
        device.set_brightness(self.value)


@dataclass(frozen=True)
class SetColorTemp:
    value: int

    def apply(self, device: ColorTunable) -> None:
        device.set_color_temp(self.value)


@dataclass(frozen=True)
class Lock:
    def apply(self, device: Lockable) -> None:
        device.lock()


@dataclass(frozen=True)
class Unlock:
    def apply(self, device: Lockable) -> None:
        device.unlock()


DeviceCommand = Union[PowerOn, PowerOff, SetTemperature, SetBrightness, SetColorTemp, Lock, Unlock]


@dataclass(frozen=True)
class CommandSpec:
    """
    One registry entry.

    name: abstract command name used in actions
    command_type: typed command variant built from the parameter
    capability: interface the target device must implement
    operation: name of the concrete device operation (for messages)
    parameter: expected parameter shape
    """

    name: str
    command_type: Callable[..., Any]
    capability: Type[Any]
    operation: str
    parameter: ParameterKind = ParameterKind.NONE
    description: str = ""

    def parse_parameter(self, raw: Optional[Any]) -> Optional[Union[float, int]]:
        """
        Coerce the string parameter to this entry's parameter type.

        Returns:
            The typed value, or None for parameterless commands

        Raises:
            ParameterFormatError: If the string is not a valid value
        """
        if self.parameter is ParameterKind.NONE:
            return None

        raw_text = "" if raw is None else str(raw)
        text = raw_text.strip()
        if not _NUMBER_RE.fullmatch(text):
            raise ParameterFormatError(self.name, raw_text, "number")
        value = float(text)
        if not math.isfinite(value):
            raise ParameterFormatError(self.name, raw_text, "finite number")

        if self.parameter is ParameterKind.INTEGER:
            if not value.is_integer():
                raise ParameterFormatError(self.name, raw_text, "integer")
            return int(value)
        return value

    def build(self, raw: Optional[Any]) -> DeviceCommand:
        """Parse `raw` and build the typed command."""
        value = self.parse_parameter(raw)
        if self.parameter is ParameterKind.NONE:
            return self.command_type()
        return self.command_type(value)

    def supports(self, device: object) -> bool:
        return isinstance(device, self.capability)


class CommandRegistry:
    """
    Read-only mapping from abstract command name to CommandSpec.

    Extend with with_commands(), which returns a new registry and leaves
    this one untouched.
    """

    def __init__(self, specs: Iterable[CommandSpec]):
        table = {}
        for spec in specs:
            if spec.name in table:
                raise ValueError(f"Command '{spec.name}' already registered")
            table[spec.name] = spec
        self._specs: Mapping[str, CommandSpec] = MappingProxyType(table)

    def get(self, name: str) -> Optional[CommandSpec]:
        return self._specs.get(name)

    def resolve(self, name: str) -> CommandSpec:
        """
        Look up a command.

        Raises:
            UnregisteredCommandError: If no entry exists for `name`
        """
        spec = self._specs.get(name)
        if spec is None:
            raise UnregisteredCommandError(name)
        return spec

    def with_commands(self, *specs: CommandSpec) -> "CommandRegistry":
        return CommandRegistry(tuple(self._specs.values()) + specs)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._specs.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self):
        return iter(self._specs.values())


DEFAULT_COMMANDS: Tuple[CommandSpec, ...] = (
    CommandSpec("powerOn", PowerOn, PowerControl, "power_on",
                description="Switch the device on (does not bring it online)"),
    CommandSpec("powerOff", PowerOff, PowerControl, "power_off",
                description="Switch the device off; it also goes offline"),
    CommandSpec("setTemperature", SetTemperature, TemperatureControl, "set_target_temp",
                ParameterKind.NUMBER, "Set the target temperature in °C"),
    CommandSpec("setBrightness", SetBrightness, Dimmable, "set_brightness",
                ParameterKind.INTEGER, "Set brightness (0-100)"),
    CommandSpec("setColorTemp", SetColorTemp, ColorTunable, "set_color_temp",
                ParameterKind.INTEGER, "Set colour temperature in kelvin"),
    CommandSpec("lock", Lock, Lockable, "lock", description="Engage the lock"),
    CommandSpec("unlock", Unlock, Lockable, "unlock", description="Release the lock"),
)

DEFAULT_REGISTRY = CommandRegistry(DEFAULT_COMMANDS)
