"""
Title: Simulator Host Bindings
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-16
Version: 1.1

Purpose:
Resolves the simulator commands and data references needed by the Landing
Throttle Manager and exposes them as the sensor and actuator gateways the
manager consumes. Lookup happens once at start-up; any missing identifier is
fatal and reported with a description of what could not be found.

Targeted Requirements:
- LTM-IR001: Fail start-up if any command or data reference is missing.
- LTM-IR002: Provide throttle ratio, IAS, all-wheels-on-ground, flap angle,
  gear deploy ratio and height above ground as sensor reads.
- LTM-IR003: Provide throttle-down and thrust-reverse holds as begin/end pairs.

Scope and Limitations:
- The host API is injected as plain callables (find/read/begin/end), so no
  particular simulator SDK is imported here.
- Array data references (flaps, gear) are read at index 0 only.
- plugin_shell.PluginShell is the host-facing wiring built on these gateways.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.
"""

from dataclasses import dataclass
from typing import Any, Callable


class HostBindingError(RuntimeError):
    pass


# (identifier, description used in the start-up failure message)
THROTTLE_DOWN_COMMAND = ("sim/engines/throttle_down", "throttle down command")
REVERSE_THRUST_COMMAND = ("sim/engines/thrust_reverse_hold", "reverse thrust command")

THROTTLE_RATIO_DATAREF = ("sim/cockpit2/engine/actuators/throttle_ratio_all", "throttle ratio data")
INDICATED_AIRSPEED_DATAREF = ("sim/flightmodel/position/indicated_airspeed2", "indicated air speed data")
ALL_WHEELS_ON_GROUND_DATAREF = ("sim/flightmodel/failures/onground_all", "all wheels on ground data")
FLAP_ANGLE_DATAREF = ("sim/flightmodel2/wing/flap1_deg", "flaps angle data")
GEAR_DEPLOY_RATIO_DATAREF = ("sim/flightmodel2/gear/deploy_ratio", "gear deploy data")
ALTITUDE_AGL_DATAREF = ("sim/flightmodel2/position/y_agl", "altitude above ground data")

COMMANDS = {
    "throttle_down": THROTTLE_DOWN_COMMAND,
    "reverse_thrust": REVERSE_THRUST_COMMAND,
}

DATAREFS = {
    "throttle_ratio": THROTTLE_RATIO_DATAREF,
    "indicated_airspeed": INDICATED_AIRSPEED_DATAREF,
    "all_wheels_on_ground": ALL_WHEELS_ON_GROUND_DATAREF,
    "flap_angle": FLAP_ANGLE_DATAREF,
    "gear_deploy_ratio": GEAR_DEPLOY_RATIO_DATAREF,
    "altitude_agl": ALTITUDE_AGL_DATAREF,
}


@dataclass(frozen=True)
class HostBindings:
    commands: dict[str, Any]
    datarefs: dict[str, Any]


def resolve_bindings(
    find_command: Callable[[str], Any],
    find_dataref: Callable[[str], Any],
) -> HostBindings:
    commands: dict[str, Any] = {}
    for key, (identifier, description) in COMMANDS.items():
        ref = find_command(identifier)
        if ref is None:
            raise HostBindingError(f"Failed to find {description} ({identifier})")
        commands[key] = ref

    datarefs: dict[str, Any] = {}
    for key, (identifier, description) in DATAREFS.items():
        ref = find_dataref(identifier)
        if ref is None:
            raise HostBindingError(f"Failed to find {description} ({identifier})")
        datarefs[key] = ref

    return HostBindings(commands=commands, datarefs=datarefs)


class DatarefSensorGateway:
    def __init__(
        self,
        bindings: HostBindings,
        get_float: Callable[[Any], float],
        get_int: Callable[[Any], int],
        get_float_array: Callable[[Any, int, int], list[float]],
    ):
        self._refs = bindings.datarefs
        self._get_float = get_float
        self._get_int = get_int
        self._get_float_array = get_float_array

    def _first_element(self, key: str) -> float:
        values = self._get_float_array(self._refs[key], 0, 1)
        return float(values[0])

    def read_throttle_ratio(self) -> float:
        return float(self._get_float(self._refs["throttle_ratio"]))

    def read_indicated_airspeed(self) -> float:
        return float(self._get_float(self._refs["indicated_airspeed"]))

    def read_all_wheels_on_ground(self) -> bool:
        return int(self._get_int(self._refs["all_wheels_on_ground"])) == 1

    def read_flap_angle(self) -> float:
        return self._first_element("flap_angle")

    def read_gear_deploy_ratio(self) -> float:
        return self._first_element("gear_deploy_ratio")

    def read_altitude_above_ground(self) -> float:
        return float(self._get_float(self._refs["altitude_agl"]))


class CommandActuatorGateway:
    def __init__(
        self,
        bindings: HostBindings,
        command_begin: Callable[[Any], None],
        command_end: Callable[[Any], None],
    ):
        self._cmds = bindings.commands
        self._command_begin = command_begin
        self._command_end = command_end

    def begin_throttle_reduction_hold(self) -> None:
        self._command_begin(self._cmds["throttle_down"])

    def end_throttle_reduction_hold(self) -> None:
        self._command_end(self._cmds["throttle_down"])

    def begin_reverse_thrust_hold(self) -> None:
        self._command_begin(self._cmds["reverse_thrust"])

    def end_reverse_thrust_hold(self) -> None:
        self._command_end(self._cmds["reverse_thrust"])
