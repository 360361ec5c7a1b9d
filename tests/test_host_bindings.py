# test_host_bindings.py
#
# Unit tests for simulator identifier resolution and the dataref/command
# gateways built on top of it.

import pytest

from host_bindings import (
    ALL_WHEELS_ON_GROUND_DATAREF,
    COMMANDS,
    DATAREFS,
    GEAR_DEPLOY_RATIO_DATAREF,
    REVERSE_THRUST_COMMAND,
    CommandActuatorGateway,
    DatarefSensorGateway,
    HostBindingError,
    resolve_bindings,
)
from landing_states import LandingState
from landing_throttle_manager import LandingThrottleManager
from throttle_configuration import ThrottleManagerConfiguration


class FakeHost:
    # Minimal stand-in for the simulator SDK: refs are the identifier strings.
    def __init__(self, missing=()):
        self.missing = set(missing)
        self.values = {
            "sim/cockpit2/engine/actuators/throttle_ratio_all": 0.0,
            "sim/flightmodel/position/indicated_airspeed2": 140.0,
            "sim/flightmodel/failures/onground_all": 0,
            "sim/flightmodel2/wing/flap1_deg": [22.0, 22.0],
            "sim/flightmodel2/gear/deploy_ratio": [1.0, 1.0, 1.0],
            "sim/flightmodel2/position/y_agl": 90.0,
        }
        self.commands: list[tuple[str, str]] = []

    def find(self, identifier):
        return None if identifier in self.missing else identifier

    def get_float(self, ref):
        return self.values[ref]

    def get_int(self, ref):
        return self.values[ref]

    def get_float_array(self, ref, offset, count):
        return self.values[ref][offset:offset + count]

    def begin(self, ref):
        self.commands.append(("begin", ref))

    def end(self, ref):
        self.commands.append(("end", ref))


def build(host):
    bindings = resolve_bindings(host.find, host.find)
    sensors = DatarefSensorGateway(bindings, host.get_float, host.get_int, host.get_float_array)
    actuators = CommandActuatorGateway(bindings, host.begin, host.end)
    return bindings, sensors, actuators


def test_resolves_every_identifier():
    bindings, _, _ = build(FakeHost())
    assert set(bindings.commands) == set(COMMANDS)
    assert set(bindings.datarefs) == set(DATAREFS)


@pytest.mark.parametrize(
    "identifier, description",
    [REVERSE_THRUST_COMMAND, GEAR_DEPLOY_RATIO_DATAREF, ALL_WHEELS_ON_GROUND_DATAREF],
)
def test_missing_identifier_is_fatal(identifier, description):
    host = FakeHost(missing={identifier})
    with pytest.raises(HostBindingError, match=f"Failed to find {description}"):
        resolve_bindings(host.find, host.find)


def test_sensor_gateway_reads_values():
    host = FakeHost()
    _, sensors, _ = build(host)

    assert sensors.read_throttle_ratio() == 0.0
    assert sensors.read_indicated_airspeed() == 140.0
    assert sensors.read_all_wheels_on_ground() is False
    assert sensors.read_flap_angle() == 22.0
    assert sensors.read_gear_deploy_ratio() == 1.0
    assert sensors.read_altitude_above_ground() == 90.0

    host.values["sim/flightmodel/failures/onground_all"] = 1
    assert sensors.read_all_wheels_on_ground() is True


def test_actuator_gateway_maps_holds_to_commands():
    host = FakeHost()
    _, _, actuators = build(host)

    actuators.begin_throttle_reduction_hold()
    actuators.end_throttle_reduction_hold()
    actuators.begin_reverse_thrust_hold()
    actuators.end_reverse_thrust_hold()

    assert host.commands == [
        ("begin", "sim/engines/throttle_down"),
        ("end", "sim/engines/throttle_down"),
        ("begin", "sim/engines/thrust_reverse_hold"),
        ("end", "sim/engines/thrust_reverse_hold"),
    ]


def test_manager_runs_over_host_gateways():
    host = FakeHost()
    _, sensors, actuators = build(host)
    m = LandingThrottleManager(ThrottleManagerConfiguration(), sensors, actuators, clock=lambda: 0.0)

    assert m.request_activate().accepted is True
    m.tick()
    assert m.state == LandingState.AWAITING_TOUCHDOWN

    host.values["sim/flightmodel/failures/onground_all"] = 1
    m.tick()
    m.tick()
    assert m.state == LandingState.AWAITING_REVERSE_END
    assert host.commands == [("begin", "sim/engines/thrust_reverse_hold")]
