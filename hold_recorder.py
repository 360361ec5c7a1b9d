"""
Title: Actuator Hold Recorder
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-17
Version: 1.1

Purpose:
Appends a timestamped CSV line each time an actuator hold (throttle down,
thrust reverse) begins or ends, so a landing rollout can be reviewed after
the session. Only transitions of an active hold are recorded; an end sent to
a hold that was never begun does not appear.

Targeted Requirements:
None (supporting analysis tooling only).

Scope and Limitations:
- One file per recorder; the header is written only when the file is new.
- Writes are serialised with a lock because holds are driven from the
  control loop thread while the CLI may read the file.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
"""

from __future__ import annotations

import csv
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

FIELDS = ("timestamp", "hold", "action")


@dataclass
class HoldRecorder:
    filepath: Path
    clock: Callable[[], float]

    def __post_init__(self) -> None:
        self.filepath = Path(self.filepath)
        self._lock = threading.Lock()
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

        if not self.filepath.exists():
            with self.filepath.open("w", encoding="utf-8", newline="") as f:
                csv.writer(f, lineterminator="\n").writerow(FIELDS)

    def record(self, *, hold: str, action: str) -> None:
        row = (f"{self.clock():.6f}", hold.strip(), action)

        with self._lock:
            with self.filepath.open("a", encoding="utf-8", newline="") as f:
                csv.writer(f, lineterminator="\n").writerow(row)

    def entries(self) -> list[dict[str, str]]:
        # Rows recorded so far, oldest first
        with self._lock:
            with self.filepath.open(encoding="utf-8", newline="") as f:
                return list(csv.DictReader(f))
