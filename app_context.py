"""
Title: Application Context Container for LTM
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-15
Version: 1.0

Purpose:
Defines a central application context object for the Landing Throttle Manager
simulation. The AppContext aggregates the manager, the rollout simulator, the
operator interface, shared configuration and lifecycle control primitives
into a single, explicit container to simplify wiring and controlled shutdown.

Targeted Requirements:
- None (supporting analysis, integration, and tooling only)

Scope and Limitations:
- Intended for simulation and CLI-driven execution only.
- Acts purely as a dependency container; contains no control or safety logic.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.
"""

from dataclasses import dataclass
from threading import Event
from typing import Callable

from cli_support import ControlLoop
from hold_recorder import HoldRecorder
from landing_throttle_manager import LandingThrottleManager
from operator_interface import OperatorInterface
from sims.rollout_simulator import LandingRolloutSimulator
from throttle_configuration import ThrottleManagerConfiguration


@dataclass
class AppContext:
    manager: LandingThrottleManager
    config: ThrottleManagerConfiguration
    clock: Callable[[], float]
    shutdown_event: Event

    simulator: LandingRolloutSimulator
    operator: OperatorInterface
    loop: ControlLoop
    recorder: HoldRecorder | None = None

    def shutdown(self) -> None:
        self.shutdown_event.set()
        self.loop.stop()
        # Never leave a hold engaged on exit
        self.manager.shutdown()
