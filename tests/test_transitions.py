"""
Title: Landing Sequence Transition Table Unit Tests
Author: Alex Cooke
Date Created: 2026-01-16
Last Modified: 2026-01-16
Version: 1.0

Purpose:
Verifies every row of the landing sequence transition table directly against
the pure transition function, without any gateway.

Targeted Requirements (Verification Only):
- LTM-FR002, LTM-FR003, LTM-FR004, LTM-FR005

Safety Notice:
This file is a test artefact intended solely for verification and assessment.
It must not be used in operational or flight-certified systems.

Dependencies:
- Python 3.10+
- pytest
"""

import dataclasses
import math

import pytest

from landing_states import DEACTIVATION_CHECKPOINTS, LandingState
from landing_transitions import Effect, TickInputs, advance
from throttle_configuration import ThrottleManagerConfiguration

S = LandingState
E = Effect

CONFIG = ThrottleManagerConfiguration()


@pytest.mark.parametrize(
    "state, inputs, next_state, effects, consumed",
    [
        (S.IDLE, TickInputs(throttle_ratio=0.5, all_wheels_on_ground=True), S.IDLE, (), False),
        (S.STARTING, TickInputs(throttle_ratio=0.3), S.REDUCING_THROTTLE, (), False),
        (S.STARTING, TickInputs(throttle_ratio=0.0), S.AWAITING_TOUCHDOWN, (), False),
        (S.STARTING, TickInputs(throttle_ratio=-0.1), S.AWAITING_TOUCHDOWN, (), False),
        (S.STARTING, TickInputs(throttle_ratio=math.nan), S.AWAITING_TOUCHDOWN, (), False),
        (S.REDUCING_THROTTLE, TickInputs(throttle_ratio=0.3), S.AWAITING_IDLE_THROTTLE,
         (E.BEGIN_THROTTLE_REDUCTION,), False),
        (S.AWAITING_IDLE_THROTTLE, TickInputs(throttle_ratio=0.3, deactivation_requested=True), S.IDLE,
         (E.END_THROTTLE_REDUCTION,), True),
        (S.AWAITING_IDLE_THROTTLE, TickInputs(throttle_ratio=0.0), S.AWAITING_TOUCHDOWN,
         (E.END_THROTTLE_REDUCTION,), False),
        (S.AWAITING_IDLE_THROTTLE, TickInputs(throttle_ratio=0.1), S.AWAITING_IDLE_THROTTLE, (), False),
        (S.AWAITING_TOUCHDOWN, TickInputs(deactivation_requested=True, all_wheels_on_ground=True), S.IDLE,
         (E.END_REVERSE_THRUST,), True),
        (S.AWAITING_TOUCHDOWN, TickInputs(all_wheels_on_ground=True), S.APPLYING_REVERSE, (), False),
        (S.AWAITING_TOUCHDOWN, TickInputs(all_wheels_on_ground=False), S.AWAITING_TOUCHDOWN, (), False),
        (S.APPLYING_REVERSE, TickInputs(indicated_airspeed_kt=80.0), S.AWAITING_REVERSE_END,
         (E.BEGIN_REVERSE_THRUST,), False),
        (S.APPLYING_REVERSE, TickInputs(indicated_airspeed_kt=60.0), S.IDLE, (), False),
        (S.AWAITING_REVERSE_END, TickInputs(indicated_airspeed_kt=80.0, deactivation_requested=True), S.IDLE,
         (E.END_REVERSE_THRUST,), True),
        (S.AWAITING_REVERSE_END, TickInputs(indicated_airspeed_kt=60.0), S.IDLE,
         (E.END_REVERSE_THRUST,), False),
        (S.AWAITING_REVERSE_END, TickInputs(indicated_airspeed_kt=60.1), S.AWAITING_REVERSE_END, (), False),
    ],
)
def test_transition_table_row(state, inputs, next_state, effects, consumed):
    t = advance(state, inputs, CONFIG)
    assert t.next_state == next_state
    assert t.effects == effects
    assert t.consumed_deactivation is consumed


@pytest.mark.parametrize("state", sorted(DEACTIVATION_CHECKPOINTS, key=lambda s: s.value))
def test_deactivation_checked_before_any_other_condition(state):
    # Inputs that would otherwise advance each checkpoint state
    inputs = TickInputs(
        throttle_ratio=0.0,
        indicated_airspeed_kt=10.0,
        all_wheels_on_ground=True,
        deactivation_requested=True,
    )
    t = advance(state, inputs, CONFIG)
    assert t.next_state == S.IDLE
    assert t.consumed_deactivation is True
    assert len(t.effects) == 1


@pytest.mark.parametrize("state", [S.STARTING, S.REDUCING_THROTTLE, S.APPLYING_REVERSE])
def test_transient_states_leave_deactivation_pending(state):
    inputs = TickInputs(throttle_ratio=0.3, indicated_airspeed_kt=90.0, deactivation_requested=True)
    t = advance(state, inputs, CONFIG)
    assert t.consumed_deactivation is False
    assert t.next_state != S.IDLE


def test_idle_throttle_tolerance_treats_small_ratio_as_idle():
    tolerant = dataclasses.replace(CONFIG, idle_throttle_tolerance=0.01)
    t = advance(S.AWAITING_IDLE_THROTTLE, TickInputs(throttle_ratio=0.005), tolerant)
    assert t.next_state == S.AWAITING_TOUCHDOWN

    t = advance(S.STARTING, TickInputs(throttle_ratio=0.005), tolerant)
    assert t.next_state == S.AWAITING_TOUCHDOWN


def test_reverse_minimum_follows_configuration():
    custom = dataclasses.replace(CONFIG, min_reverse_airspeed_kt=80.0)
    t = advance(S.APPLYING_REVERSE, TickInputs(indicated_airspeed_kt=75.0), custom)
    assert t.next_state == S.IDLE
    assert t.effects == ()


def test_every_transition_into_idle_from_a_hold_state_ends_that_hold():
    cases = [
        (S.AWAITING_IDLE_THROTTLE, TickInputs(throttle_ratio=0.5, deactivation_requested=True),
         E.END_THROTTLE_REDUCTION),
        (S.AWAITING_REVERSE_END, TickInputs(indicated_airspeed_kt=90.0, deactivation_requested=True),
         E.END_REVERSE_THRUST),
        (S.AWAITING_REVERSE_END, TickInputs(indicated_airspeed_kt=40.0), E.END_REVERSE_THRUST),
    ]
    for state, inputs, end_effect in cases:
        t = advance(state, inputs, CONFIG)
        assert t.next_state == S.IDLE
        assert end_effect in t.effects


def test_transitions_carry_a_diagnostic_reason_when_state_changes():
    t = advance(S.STARTING, TickInputs(throttle_ratio=0.3), CONFIG)
    assert t.reason == "Going to throttle down as we are not at idle throttle"

    t = advance(S.AWAITING_TOUCHDOWN, TickInputs(), CONFIG)
    assert t.reason is None
