"""
Title: Landing Throttle Manager Transition Function
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-16
Version: 1.2

Purpose:
Implements the landing sequence transition table as a pure function of the
current state and the inputs sampled on one tick. Actuator effects are
returned as an explicit, ordered tuple instead of being performed inline, so
the table can be verified without any gateway in place. The
LandingThrottleManager applies the returned effects.

Targeted Requirements:
- LTM-FR002: Reduce throttle to idle before waiting for touchdown.
- LTM-FR003: Wait for all wheels on ground before reverse thrust.
- LTM-FR004: Hold reverse thrust only while IAS is above the reverse minimum.
- LTM-FR005: Honour a pending deactivation request at every waiting state,
  ending any hold first.

Scope and Limitations:
- At most one state transition per call.
- A deactivation request is only consumed by AWAITING_IDLE_THROTTLE,
  AWAITING_TOUCHDOWN and AWAITING_REVERSE_END; the transient states leave it
  pending for the next checking state.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.
"""

from dataclasses import dataclass
from enum import Enum, auto

from landing_states import LandingState
from throttle_configuration import ThrottleManagerConfiguration


class Effect(Enum):
    BEGIN_THROTTLE_REDUCTION = auto()
    END_THROTTLE_REDUCTION = auto()
    BEGIN_REVERSE_THRUST = auto()
    END_REVERSE_THRUST = auto()


@dataclass(frozen=True)
class TickInputs:
    throttle_ratio: float = 0.0
    indicated_airspeed_kt: float = 0.0
    all_wheels_on_ground: bool = False
    deactivation_requested: bool = False


@dataclass(frozen=True)
class Transition:
    next_state: LandingState
    effects: tuple[Effect, ...] = ()
    consumed_deactivation: bool = False
    reason: str | None = None


def _stay(state: LandingState) -> Transition:
    return Transition(next_state=state)


def advance(
    state: LandingState,
    inputs: TickInputs,
    config: ThrottleManagerConfiguration,
) -> Transition:
    # Advances the landing sequence by one tick (pure).
    reverse_min = config.min_reverse_airspeed_kt

    if state == LandingState.IDLE:
        # Only request_activate() leaves IDLE
        return _stay(state)

    if state == LandingState.STARTING:
        if config.throttle_above_idle(inputs.throttle_ratio):
            return Transition(
                next_state=LandingState.REDUCING_THROTTLE,
                reason="Going to throttle down as we are not at idle throttle",
            )
        return Transition(
            next_state=LandingState.AWAITING_TOUCHDOWN,
            reason="Already at idle throttle, waiting for touch down of all three wheels",
        )

    if state == LandingState.REDUCING_THROTTLE:
        return Transition(
            next_state=LandingState.AWAITING_IDLE_THROTTLE,
            effects=(Effect.BEGIN_THROTTLE_REDUCTION,),
            reason="Throttling down, waiting for idle throttle",
        )

    if state == LandingState.AWAITING_IDLE_THROTTLE:
        if inputs.deactivation_requested:
            return Transition(
                next_state=LandingState.IDLE,
                effects=(Effect.END_THROTTLE_REDUCTION,),
                consumed_deactivation=True,
                reason="Deactivation while waiting for idle throttle",
            )
        if config.throttle_is_idle(inputs.throttle_ratio):
            return Transition(
                next_state=LandingState.AWAITING_TOUCHDOWN,
                effects=(Effect.END_THROTTLE_REDUCTION,),
                reason="Throttle now at idle, waiting for touch down of all three wheels",
            )
        return _stay(state)

    if state == LandingState.AWAITING_TOUCHDOWN:
        if inputs.deactivation_requested:
            # Reverse hold is not open here; ending it is harmless
            return Transition(
                next_state=LandingState.IDLE,
                effects=(Effect.END_REVERSE_THRUST,),
                consumed_deactivation=True,
                reason="Deactivation while waiting for touch down",
            )
        if inputs.all_wheels_on_ground:
            return Transition(
                next_state=LandingState.APPLYING_REVERSE,
                reason="All wheels on ground, applying reverse thrust",
            )
        return _stay(state)

    if state == LandingState.APPLYING_REVERSE:
        if inputs.indicated_airspeed_kt > reverse_min:
            return Transition(
                next_state=LandingState.AWAITING_REVERSE_END,
                effects=(Effect.BEGIN_REVERSE_THRUST,),
                reason=(
                    f"Indicated air speed={inputs.indicated_airspeed_kt:f} which is above the "
                    f"minimum of {reverse_min:f}, waiting for end condition"
                ),
            )
        return Transition(
            next_state=LandingState.IDLE,
            reason=(
                f"Indicated air speed={inputs.indicated_airspeed_kt:f} is already at or below "
                f"{reverse_min:f}, reverse thrust not applied"
            ),
        )

    if state == LandingState.AWAITING_REVERSE_END:
        if inputs.deactivation_requested:
            return Transition(
                next_state=LandingState.IDLE,
                effects=(Effect.END_REVERSE_THRUST,),
                consumed_deactivation=True,
                reason="Deactivation while waiting for end of reverse thrust",
            )
        if inputs.indicated_airspeed_kt <= reverse_min:
            return Transition(
                next_state=LandingState.IDLE,
                effects=(Effect.END_REVERSE_THRUST,),
                reason=(
                    f"Indicated air speed is {inputs.indicated_airspeed_kt:f}, which is less than "
                    f"{reverse_min:f}, end of reverse thrust"
                ),
            )
        return _stay(state)

    raise ValueError(f"Unknown landing state: {state!r}")
