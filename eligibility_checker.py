"""
Title: Landing Eligibility Checker
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-15
Version: 1.1

Purpose:
Evaluates the four landing-condition predicates against a snapshot of the
current sensor values taken when the operator asks for activation. Every
predicate is evaluated independently so that all violations can be announced
to the pilot at once.

Targeted Requirements:
- LTM-FR001: Activation only when IAS <= 160 kt, flaps >= 18 deg, gear fully
  down and height above ground <= 152.4 m (500 ft).
- LTM-FR006: Voice guidance naming every unmet condition.

Scope and Limitations:
- Pure function over its inputs; never raises and has no side effects.
- Gear deploy ratio is compared exactly against the configured down ratio
  unless a tolerance is configured.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- enum (standard library)
- throttle_configuration.py
"""

from dataclasses import dataclass
from enum import Enum

from throttle_configuration import ThrottleManagerConfiguration


class Violation(Enum):
    AIRSPEED_TOO_HIGH = "airspeed-too-high"
    FLAPS_TOO_LOW = "flaps-too-low"
    GEAR_NOT_DOWN = "gear-not-down"
    ALTITUDE_TOO_HIGH = "altitude-too-high"


# Spoken order follows declaration order of Violation.
ADVISORY_LABELS: dict[Violation, str] = {
    Violation.AIRSPEED_TOO_HIGH: "Airspeed too high",
    Violation.FLAPS_TOO_LOW: "Flaps too low",
    Violation.GEAR_NOT_DOWN: "Gear not down",
    Violation.ALTITUDE_TOO_HIGH: "Altitude too high",
}


@dataclass(frozen=True)
class EligibilitySnapshot:
    indicated_airspeed_kt: float
    flap_angle_deg: float
    gear_deploy_ratio: float
    altitude_agl_m: float
    throttle_ratio: float

    @classmethod
    def read_from(cls, sensors) -> "EligibilitySnapshot":
        return cls(
            indicated_airspeed_kt=float(sensors.read_indicated_airspeed()),
            flap_angle_deg=float(sensors.read_flap_angle()),
            gear_deploy_ratio=float(sensors.read_gear_deploy_ratio()),
            altitude_agl_m=float(sensors.read_altitude_above_ground()),
            throttle_ratio=float(sensors.read_throttle_ratio()),
        )


@dataclass(frozen=True)
class EligibilityResult:
    violations: frozenset[Violation]

    @property
    def eligible(self) -> bool:
        return not self.violations


def check_eligibility(
    snapshot: EligibilitySnapshot,
    config: ThrottleManagerConfiguration,
) -> EligibilityResult:
    violations: set[Violation] = set()

    # Positive form of each predicate so a NaN reading is a violation
    if not snapshot.indicated_airspeed_kt <= config.max_airspeed_kt:
        violations.add(Violation.AIRSPEED_TOO_HIGH)
    if not snapshot.flap_angle_deg >= config.min_flap_angle_deg:
        violations.add(Violation.FLAPS_TOO_LOW)
    if not config.gear_is_down(snapshot.gear_deploy_ratio):
        violations.add(Violation.GEAR_NOT_DOWN)
    if not snapshot.altitude_agl_m <= config.max_altitude_agl_m:
        violations.add(Violation.ALTITUDE_TOO_HIGH)

    return EligibilityResult(violations=frozenset(violations))


def advisory_text(violations) -> str:
    # Empty string when nothing is violated (nothing is spoken).
    return " ".join(ADVISORY_LABELS[v] for v in Violation if v in violations)


def diagnostic_lines(
    snapshot: EligibilitySnapshot,
    config: ThrottleManagerConfiguration,
) -> list[str]:
    gear_down = "yes" if config.gear_is_down(snapshot.gear_deploy_ratio) else "no"
    return [
        f"Current IAS={snapshot.indicated_airspeed_kt:f} (require {config.max_airspeed_kt:f} or below)",
        f"Current flap angle={snapshot.flap_angle_deg:f} (require {config.min_flap_angle_deg:f} or above)",
        f"Current gears are down={gear_down} (require yes)",
        f"Current altitude={snapshot.altitude_agl_m:f}m (require {config.max_altitude_agl_m:f}m or below)",
    ]
