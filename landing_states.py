"""
Title: Landing Throttle Manager State Definitions (LTM LandingState Enum)
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-14
Version: 1.0

Purpose:
Defines the authoritative set of states used by the Landing Throttle Manager
(LTM) state machine. IDLE is both the rest state and the re-entrant start
point; every other state is a step of the throttle-reduction and reverse
thrust sequence flown during the landing rollout.

Targeted Requirements:
- LTM-FR002: Provides STARTING, REDUCING_THROTTLE and AWAITING_IDLE_THROTTLE
  to sequence the reduction to idle throttle.
- LTM-FR003: Provides AWAITING_TOUCHDOWN so reverse thrust is never applied
  before all wheels are on the ground.
- LTM-FR004: Provides APPLYING_REVERSE and AWAITING_REVERSE_END to bound the
  reverse thrust hold.

Scope and Limitations:
- This enumeration defines logical states only; it does not encode actuator
  hold status or sensor values.
- There is no terminal or fault state; every path returns to IDLE.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- enum (standard library)
"""

from enum import Enum, auto

class LandingState(Enum):
    IDLE = auto()
    STARTING = auto()
    REDUCING_THROTTLE = auto()
    AWAITING_IDLE_THROTTLE = auto()
    AWAITING_TOUCHDOWN = auto()
    APPLYING_REVERSE = auto()
    AWAITING_REVERSE_END = auto()


# States that poll the deactivation request before anything else.
DEACTIVATION_CHECKPOINTS = frozenset(
    {
        LandingState.AWAITING_IDLE_THROTTLE,
        LandingState.AWAITING_TOUCHDOWN,
        LandingState.AWAITING_REVERSE_END,
    }
)
