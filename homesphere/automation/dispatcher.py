"""
Action dispatcher.

Resolves (command, parameter, device) against the command registry, parses
the parameter, checks the device capability and applies the typed command.
Every failure becomes an ActionOutcome; nothing raises past execute().
"""

from typing import Optional

from homesphere.automation.actions import ActionOutcome, DeviceAction
from homesphere.automation.commands import DEFAULT_REGISTRY, CommandRegistry
from homesphere.errors import CapabilityMismatchError, DispatchError, FailureKind
from homesphere.hs_logging import get_logger


class ActionDispatcher:
    """
    Executes device actions one at a time, synchronously, without retries.
    """

    def __init__(self, registry: Optional[CommandRegistry] = None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self._log = get_logger("HOMESPHERE.Dispatch")

    def execute(self, action: DeviceAction) -> ActionOutcome:
        """
        Execute one action.

        Args:
            action: Action to apply

        Returns:
            ActionOutcome with success flag, failure kind and a readable reason
        """
        device = action.device
        self._log.info("HOMESPHERE.Dispatch.Executing", extra={"fields": {
            "command": action.command,
            "parameter": action.parameter,
            "device_id": device.device_id,
            "device_name": device.name,
        }})

        try:
            spec = self.registry.resolve(action.command)
            command = spec.build(action.parameter)
            if not spec.supports(device):
                raise CapabilityMismatchError(action.command, device.name, spec.operation)
        except DispatchError as e:
            return self._failed(action, e.kind, e.reason)

        try:
            command.apply(device)
        except Exception as e:
            return self._failed(
                action, FailureKind.OPERATION_ERROR, f"{spec.operation}() failed: {e}", exc_info=True
            )

        reason = f"{spec.operation}() applied to {device.name}"
        self._log.info("HOMESPHERE.Dispatch.Applied", extra={"fields": {
            "command": action.command,
            "operation": spec.operation,
            "device_id": device.device_id,
        }})
        return ActionOutcome(action=action, success=True, reason=reason)

    def _failed(
        self, action: DeviceAction, kind: FailureKind, reason: str, exc_info: bool = False
    ) -> ActionOutcome:
        self._log.warning("HOMESPHERE.Dispatch.Failed", extra={"fields": {
            "command": action.command,
            "parameter": action.parameter,
            "device_id": action.device.device_id,
            "error": kind.value,
            "reason": reason,
        }}, exc_info=exc_info)
        return ActionOutcome(action=action, success=False, reason=reason, failure=kind)
