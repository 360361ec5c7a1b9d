"""
Title: Landing Throttle Manager State Machine (LTM Core)
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-17
Version: 1.3

Purpose:
Implements the landing throttle manager: a polling state machine that, once
activated by the operator, reduces the throttle to idle, waits for all wheels
to be on the ground, applies reverse thrust until the indicated airspeed falls
to the reverse thrust minimum and then returns control to the operator. The
manager owns the landing state and the pending deactivation request, samples
the sensor gateway on every tick, applies the effects returned by the pure
transition function through hold resources, and announces rejected
activations through an advisory voice output.

Targeted Requirements:
- LTM-FR001: Activation only when all landing conditions are met.
- LTM-FR002: Reduce throttle to idle before waiting for touchdown.
- LTM-FR003: Reverse thrust only after all wheels are on the ground.
- LTM-FR004: Reverse thrust held only while IAS is above the reverse minimum.
- LTM-FR005: Operator deactivation honoured at every waiting state.
- LTM-FR006: Voice guidance naming every unmet activation condition.
- LTM-FR007: "Already enabled" advisory on redundant activation.
- LTM-SR001: No actuator hold remains active once the manager is IDLE.
- LTM-PR001: tick() never blocks; one transition per tick at most.

Scope and Limitations:
- A single aircraft/session is modelled; nothing is persisted.
- Sensor and actuator gateways are assumed valid for the lifetime of the
  manager (missing identifiers are rejected by host_bindings at start-up).
- Tick cadence is monitored for diagnostics only; transition logic does not
  depend on the interval between ticks.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.
"""

# Change Log:
#
# 1.3 (2026-01-17)
#   - Holds are released on every exit from their owning state (including
#     forced state changes and shutdown), not only by table effects.
#   - request_activate() returns an ActivationResult carrying the violations.
#
# 1.2 (2026-01-16)
#   - Transition table moved to landing_transitions.advance(); the manager
#     now only samples inputs and applies effects.
#   - State and deactivation request guarded by a lock for the threaded
#     control loop.
#
# 1.1 (2026-01-15)
#   - Added advisory voice output and diagnostic sensor report on enable.
#
# 1.0 (2026-01-14)
#   - Initial state machine.

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable

from actuator_holds import Hold
from eligibility_checker import (
    EligibilitySnapshot,
    Violation,
    advisory_text,
    check_eligibility,
    diagnostic_lines,
)
from landing_states import LandingState
from landing_transitions import Effect, TickInputs, Transition, advance
from throttle_configuration import ThrottleManagerConfiguration

logger = logging.getLogger(__name__)

ALREADY_ENABLED_TEXT = "Already enabled"


@dataclass(frozen=True)
class ActivationResult:
    accepted: bool
    violations: frozenset[Violation] = field(default_factory=frozenset)
    already_active: bool = False


class LandingThrottleManager:
    def __init__(
        self,
        config: ThrottleManagerConfiguration,
        sensors,
        actuators,
        speak: Callable[[str], None] | None = None,
        clock=time.monotonic,
        hold_recorder=None,
    ):
        self._config = config
        self._sensors = sensors
        self._actuators = actuators
        self._speak = speak
        self._clock = clock

        self._lock = threading.Lock()

        self._state = LandingState.IDLE
        self._state_entered_at = self._clock()
        self._deactivation_requested = False

        self._throttle_hold = Hold(
            "throttle_reduction",
            actuators.begin_throttle_reduction_hold,
            actuators.end_throttle_reduction_hold,
            owner_state=LandingState.AWAITING_IDLE_THROTTLE,
            recorder=hold_recorder,
        )
        self._reverse_hold = Hold(
            "reverse_thrust",
            actuators.begin_reverse_thrust_hold,
            actuators.end_reverse_thrust_hold,
            owner_state=LandingState.AWAITING_REVERSE_END,
            recorder=hold_recorder,
        )

        # Tick cadence instrumentation
        self._tick_count = 0
        self._last_tick_ts: float | None = None
        self._max_tick_interval_s: float | None = None
        self._late_tick_count = 0

    # -------------------------
    # Properties / small helpers
    # -------------------------

    @property
    def state(self) -> LandingState:
        return self._state

    @property
    def config(self) -> ThrottleManagerConfiguration:
        return self._config

    @property
    def deactivation_requested(self) -> bool:
        return self._deactivation_requested

    @property
    def throttle_hold(self) -> Hold:
        return self._throttle_hold

    @property
    def reverse_hold(self) -> Hold:
        return self._reverse_hold

    @property
    def holds(self) -> tuple[Hold, Hold]:
        return (self._throttle_hold, self._reverse_hold)

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def max_tick_interval_s(self) -> float | None:
        return self._max_tick_interval_s

    @property
    def late_tick_count(self) -> int:
        return self._late_tick_count

    def time_in_state_s(self) -> float:
        return self._clock() - self._state_entered_at

    def log(self, msg: str) -> None:
        logger.info(msg)

    def diagnostic(self, msg: str) -> None:
        if self._config.diagnostics:
            self.log(msg)

    def enter_state(self, new_state: LandingState) -> None:
        self._state = new_state
        self._state_entered_at = self._clock()

        # A hold never outlives the state that owns it
        for hold in self.holds:
            if hold.active and hold.owner_state != new_state:
                hold.release()

    # -------------------------
    # Operator intents
    # -------------------------

    def request_activate(self) -> ActivationResult:
        with self._lock:
            if self._state != LandingState.IDLE:
                self._advise(ALREADY_ENABLED_TEXT)
                return ActivationResult(accepted=False, already_active=True)

            snapshot = EligibilitySnapshot.read_from(self._sensors)

            self.diagnostic("Enable requested by user")
            for line in diagnostic_lines(snapshot, self._config):
                self.diagnostic(line)

            result = check_eligibility(snapshot, self._config)

            if result.eligible:
                self._deactivation_requested = False
                self.enter_state(LandingState.STARTING)
                self.diagnostic("Conditions met, now enabled")
                return ActivationResult(accepted=True)

            text = advisory_text(result.violations)
            if text:
                self._advise(text)
            return ActivationResult(accepted=False, violations=result.violations)

    def request_deactivate(self) -> bool:
        with self._lock:
            if self._state == LandingState.IDLE:
                # Nothing to stop
                return False

            self._deactivation_requested = True
            self.diagnostic("User requested deactivation")
            return True

    def shutdown(self) -> None:
        # Host is stopping: end any open hold and return to IDLE.
        with self._lock:
            self._deactivation_requested = False
            if self._state != LandingState.IDLE:
                self.log(f"Shutdown while in {self._state.name}, returning to IDLE")
            self.enter_state(LandingState.IDLE)

    # -------------------------
    # Core tick
    # -------------------------

    def tick(self) -> float:
        # Advances the state machine by one polling tick.
        # Returns the delay until the next tick is due.
        with self._lock:
            self._check_tick_cadence(self._clock())
            self._tick_count += 1

            if self._state == LandingState.IDLE:
                return self._config.poll_interval_s

            inputs = self._sample_inputs()
            transition = advance(self._state, inputs, self._config)
            self._apply(transition)

        return self._config.poll_interval_s

    def _sample_inputs(self) -> TickInputs:
        return TickInputs(
            throttle_ratio=float(self._sensors.read_throttle_ratio()),
            indicated_airspeed_kt=float(self._sensors.read_indicated_airspeed()),
            all_wheels_on_ground=bool(self._sensors.read_all_wheels_on_ground()),
            deactivation_requested=self._deactivation_requested,
        )

    def _apply(self, transition: Transition) -> None:
        for effect in transition.effects:
            self._apply_effect(effect)

        if transition.consumed_deactivation:
            self._deactivation_requested = False

        if transition.reason:
            self.diagnostic(transition.reason)

        if transition.next_state != self._state:
            self.enter_state(transition.next_state)

    def _apply_effect(self, effect: Effect) -> None:
        if effect == Effect.BEGIN_THROTTLE_REDUCTION:
            self._throttle_hold.begin()
        elif effect == Effect.END_THROTTLE_REDUCTION:
            self._throttle_hold.end()
        elif effect == Effect.BEGIN_REVERSE_THRUST:
            self._reverse_hold.begin()
        elif effect == Effect.END_REVERSE_THRUST:
            self._reverse_hold.end()

    # -------------------------
    # Advisory output
    # -------------------------

    def _advise(self, text: str) -> None:
        self.log(f"Advisory: {text}")
        if self._speak is None:
            return
        try:
            self._speak(text)
        except Exception:
            # Voice output is best effort; the sequence carries on without it
            logger.exception("Advisory output failed: %s", text)

    # -------------------------
    # Tick cadence monitor
    # -------------------------

    def _check_tick_cadence(self, now: float) -> None:
        if self._last_tick_ts is None:
            self._last_tick_ts = float(now)
            return

        dt = float(now) - float(self._last_tick_ts)
        self._last_tick_ts = float(now)

        # If time goes backwards, ignore this interval
        if dt < 0.0:
            return

        if self._max_tick_interval_s is None or dt > self._max_tick_interval_s:
            self._max_tick_interval_s = dt

        # A whole polling interval was missed
        if dt > 2.0 * self._config.poll_interval_s:
            self._late_tick_count += 1
