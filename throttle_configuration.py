"""
Title: Landing Throttle Manager Threshold Configuration (ThrottleManagerConfiguration)
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-15
Version: 1.1

Purpose:
Defines an immutable data model holding the landing eligibility thresholds,
the reverse thrust cut-off speed and the polling interval used by the Landing
Throttle Manager. Every value has a default matching the X-Crafts ERJ family
and can be overridden at construction time (or with dataclasses.replace).

Targeted Requirements:
- LTM-FR001: Eligibility thresholds (airspeed, flaps, gear, altitude).
- LTM-FR004: Minimum airspeed for reverse thrust.
- LTM-PR001: State machine polling interval.

Scope and Limitations:
- Values are static and immutable once instantiated.
- Tolerances default to 0.0, i.e. exact comparison of the gear deploy ratio
  and the idle throttle ratio.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
"""

from dataclasses import dataclass

@dataclass(frozen=True)
class ThrottleManagerConfiguration:
    # Immutable landing throttle manager configuration.
    name: str = "ERJ"
    max_airspeed_kt: float = 160.0
    min_flap_angle_deg: float = 18.0
    gear_down_ratio: float = 1.0
    max_altitude_agl_m: float = 152.4  # 500 ft
    min_reverse_airspeed_kt: float = 60.0
    poll_interval_s: float = 0.25

    gear_down_tolerance: float = 0.0
    idle_throttle_tolerance: float = 0.0

    # Per-activation sensor report and per-transition reasons in the log
    diagnostics: bool = True

    def gear_is_down(self, deploy_ratio: float) -> bool:
        return abs(float(deploy_ratio) - self.gear_down_ratio) <= self.gear_down_tolerance

    def throttle_is_idle(self, throttle_ratio: float) -> bool:
        return abs(float(throttle_ratio)) <= self.idle_throttle_tolerance

    def throttle_above_idle(self, throttle_ratio: float) -> bool:
        # Negative or NaN ratios are not above idle
        return float(throttle_ratio) > self.idle_throttle_tolerance

    def validate(self) -> None:
        if self.poll_interval_s <= 0.0:
            raise ValueError(f"poll_interval_s must be > 0 (got {self.poll_interval_s})")

        if self.gear_down_tolerance < 0.0 or self.idle_throttle_tolerance < 0.0:
            raise ValueError("tolerances must be >= 0")

        if self.min_reverse_airspeed_kt > self.max_airspeed_kt:
            raise ValueError(
                f"min_reverse_airspeed_kt={self.min_reverse_airspeed_kt} exceeds "
                f"max_airspeed_kt={self.max_airspeed_kt}"
            )
