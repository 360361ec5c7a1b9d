"""
Title: Simulator Plugin Shell
Author: Alex Cooke
Date Created: 2026-01-17
Last Modified: 2026-01-17
Version: 1.0

Purpose:
Wires the Landing Throttle Manager into a flight simulator plugin host. On
start the shell resolves every command and data reference, builds the sensor
and actuator gateways over the host API, and creates the manager and the
operator interface. The host then calls back into the shell for its flight
loop, menu and enable command.

Targeted Requirements:
- LTM-IR001: Fail start-up if any command or data reference is missing.
- LTM-FR007: Single-action activation from a bindable command.
- LTM-SR001: No actuator hold remains active once the plugin stops.

Scope and Limitations:
- The host object is duck-typed: find_command, find_dataref, get_float,
  get_int, get_float_array, command_begin, command_end and speak.
- Menu construction and callback registration are left to the host SDK
  glue; the shell only provides the callbacks.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
"""

import logging
import time

from host_bindings import (
    CommandActuatorGateway,
    DatarefSensorGateway,
    HostBindingError,
    resolve_bindings,
)
from landing_throttle_manager import LandingThrottleManager
from operator_interface import (
    PLUGIN_DESCRIPTION,
    PLUGIN_NAME,
    PLUGIN_SIGNATURE,
    OperatorInterface,
    version_string,
)
from throttle_configuration import ThrottleManagerConfiguration

logger = logging.getLogger(__name__)


class PluginShell:
    def __init__(self, host, config: ThrottleManagerConfiguration | None = None, clock=time.monotonic):
        self._host = host
        self._config = config or ThrottleManagerConfiguration()
        self._clock = clock

        self.manager: LandingThrottleManager | None = None
        self.operator: OperatorInterface | None = None
        self.error: str | None = None

    @property
    def started(self) -> bool:
        return self.manager is not None

    def start(self) -> bool:
        # Returns False with self.error set when the host cannot supply a binding
        logger.info("%s version %s", PLUGIN_NAME, version_string())
        self._config.validate()

        host = self._host
        try:
            bindings = resolve_bindings(host.find_command, host.find_dataref)
        except HostBindingError as exc:
            self.error = str(exc)
            logger.error("Start-up failed: %s", self.error)
            return False

        sensors = DatarefSensorGateway(bindings, host.get_float, host.get_int, host.get_float_array)
        actuators = CommandActuatorGateway(bindings, host.command_begin, host.command_end)

        self.manager = LandingThrottleManager(
            config=self._config,
            sensors=sensors,
            actuators=actuators,
            speak=host.speak,
            clock=self._clock,
        )
        self.operator = OperatorInterface(self.manager)
        return True

    def profile(self) -> tuple[str, str, str]:
        return PLUGIN_NAME, PLUGIN_SIGNATURE, PLUGIN_DESCRIPTION

    def flight_loop(self, *_host_args) -> float:
        # Host flight-loop callback; the return value is the next call delay
        if self.manager is None:
            return 0.0
        return self.manager.tick()

    def menu_handler(self, item):
        if self.operator is None:
            return None
        return self.operator.handle_menu(item)

    def command_handler(self, phase) -> bool:
        if self.operator is None:
            return False
        return self.operator.handle_enable_command(phase)

    def stop(self) -> None:
        if self.manager is not None:
            self.manager.shutdown()
        self.manager = None
        self.operator = None
