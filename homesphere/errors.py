"""
Exception hierarchy for the HomeSphere hub.

Dispatch errors are raised while resolving an action and are converted into
per-action outcomes by the dispatcher; they never escape a scene trigger.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Why a single action did not apply."""

    UNREGISTERED_COMMAND = "unregistered_command"
    PARAMETER_FORMAT = "parameter_format"
    CAPABILITY_MISMATCH = "capability_mismatch"
    OPERATION_ERROR = "operation_error"


class HomeSphereError(Exception):
    """Base class for all hub errors."""


class DispatchError(HomeSphereError):
    """An action could not be turned into a device mutation."""

    kind: FailureKind = FailureKind.OPERATION_ERROR

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class UnregisteredCommandError(DispatchError):
    kind = FailureKind.UNREGISTERED_COMMAND

    def __init__(self, command: str):
        super().__init__(f"Command not recognized: {command!r}")
        self.command = command


class ParameterFormatError(DispatchError):
    kind = FailureKind.PARAMETER_FORMAT

    def __init__(self, command: str, parameter: str, expected: str):
        super().__init__(
            f"Parameter {parameter!r} for {command!r} is not a valid {expected}"
        )
        self.command = command
        self.parameter = parameter


class CapabilityMismatchError(DispatchError):
    kind = FailureKind.CAPABILITY_MISMATCH

    def __init__(self, command: str, device_name: str, operation: str):
        super().__init__(
            f"Device {device_name!r} does not support {operation}() required by {command!r}"
        )
        self.command = command
        self.operation = operation


class SceneNotFoundError(HomeSphereError, LookupError):
    def __init__(self, scene_id: int):
        super().__init__(f"Scene {scene_id} not found")
        self.scene_id = scene_id


class ConfigError(HomeSphereError, ValueError):
    """Invalid HOMESPHERE_* environment configuration."""
