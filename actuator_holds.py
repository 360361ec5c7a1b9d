"""
Title: Level-Triggered Actuator Hold
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-16
Version: 1.1

Purpose:
Wraps a begin/end pair of simulator commands (throttle down, thrust reverse
hold) as a hold resource owned by one landing state. The manager releases any
active hold whose owning state has been left, so a hold cannot outlive its
state and the manager is never IDLE with a hold engaged.

Targeted Requirements:
- LTM-SR001: No actuator hold remains active once the manager is IDLE.
- LTM-SR002: Ending a hold that is not active is a safe no-op.

Scope and Limitations:
- Tracks the hold status as last commanded; it does not read back the
  simulator's command state.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.
"""

import logging
from typing import Callable

from landing_states import LandingState

logger = logging.getLogger(__name__)


class Hold:
    def __init__(
        self,
        name: str,
        begin_fn: Callable[[], None],
        end_fn: Callable[[], None],
        owner_state: LandingState,
        recorder=None,
    ):
        self.name = name
        self.owner_state = owner_state
        self._begin_fn = begin_fn
        self._end_fn = end_fn
        self._recorder = recorder

        self._active = False
        self.begin_count = 0
        self.end_count = 0

    @property
    def active(self) -> bool:
        return self._active

    def begin(self) -> None:
        if self._active:
            # Already held, avoid a second command begin
            return
        self._begin_fn()
        self._active = True
        self.begin_count += 1
        self._record("begin")

    def end(self) -> None:
        # Always forwarded; gateway end on an inactive hold is a no-op
        self._end_fn()
        if not self._active:
            return
        self._active = False
        self.end_count += 1
        self._record("end")

    def release(self) -> bool:
        # Ends the hold only if it is still active.
        if not self._active:
            return False
        logger.warning("Releasing %s hold left open", self.name)
        self.end()
        return True

    def _record(self, action: str) -> None:
        if self._recorder is None:
            return
        self._recorder.record(hold=self.name, action=action)
