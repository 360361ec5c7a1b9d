"""
Title: CLI Support Utilities and Control Loop Abstractions
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-16
Version: 1.1

Purpose:
Provides shared support utilities for the LTM command-line interface and
simulation environment: a control loop that drives the rollout simulator and
the LandingThrottleManager either step-wise or in a background thread at the
configured polling interval, and a state annunciator printing state changes.

Targeted Requirements:
- None (supporting analysis, simulation, and tooling only)

Scope and Limitations:
- Intended for CLI-driven simulation and test support only.
- ControlLoop timing is approximate and not real-time deterministic.
- Threading model is simplified; the manager's own lock serialises ticks and
  operator intents issued from the command thread.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- logging, threading (standard library)
- landing_throttle_manager.py
- sims/rollout_simulator.py
"""

import logging
import threading
from typing import Callable, Optional

from landing_states import LandingState
from landing_throttle_manager import LandingThrottleManager
from sims.rollout_simulator import LandingRolloutSimulator

logger = logging.getLogger(__name__)


class StateAnnunciator:
    # Prints the manager state whenever it changes.
    def __init__(self):
        self._last: LandingState | None = None

    def __call__(self, manager: LandingThrottleManager) -> None:
        state = manager.state
        if state != self._last:
            print(f"STATE: {state.name}")
            self._last = state


class ControlLoop:
    def __init__(self,
                 manager: LandingThrottleManager,
                 simulator: LandingRolloutSimulator | None = None,
                 period_s: float | None = None,
                 on_tick: Optional[Callable] = None,):
        self._manager = manager
        self._simulator = simulator
        self._period_s = float(period_s if period_s is not None else manager.config.poll_interval_s)
        self._on_tick = on_tick
        self._running = False
        self._stop_evt = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def period_s(self) -> float:
        return self._period_s

    @property
    def running(self) -> bool:
        return self._running

    def set_period(self, period_s: float) -> None:
        self._period_s = max(0.01, float(period_s))

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        if self._simulator is not None:
            self._simulator.sync_clock()
        self._stop_evt.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if not self._running:
            return
        self._stop_evt.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
        self._running = False
        self._thread = None

    def step(self, n: int = 1) -> None:
        # Fixed-step: simulator advanced by exactly one period per tick.
        for _ in range(max(1, int(n))):
            if self._simulator is not None:
                self._simulator.step(self._period_s)
            self._manager.tick()
            if self._on_tick:
                self._on_tick(self._manager)

    def _run(self) -> None:
        while not self._stop_evt.is_set():
            try:
                if self._simulator is not None:
                    self._simulator.update()
                self._manager.tick()
                if self._on_tick:
                    self._on_tick(self._manager)
            except Exception:
                logger.exception("Unhandled exception in control loop")
            self._stop_evt.wait(self._period_s)
