"""
Title: Landing Rollout Simulator
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-16
Version: 1.1

Purpose:
Provides a lightweight, deterministic model of the final approach and landing
rollout for exercising the Landing Throttle Manager without a flight
simulator. The simulator implements both the sensor gateway (reads) and the
actuator gateway (throttle-down and thrust-reverse holds) and supports both
fixed time-step and injected-clock operation.

Targeted Requirements:
- None (supporting analysis or tooling only)

Scope and Limitations:
- Kinematics only: constant sink rate, linear throttle spool-down and linear
  airspeed decay; no aerodynamic or engine model.
- Touchdown of all wheels is simultaneous when height above ground reaches 0.
- Intended solely for test stimulation and CLI demonstration.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
"""


class LandingRolloutSimulator:
    def __init__(
        self,
        airspeed_kt=140.0,
        altitude_agl_m=120.0,
        throttle_ratio=0.35,
        flap_angle_deg=22.0,
        gear_deploy_ratio=1.0,
        sink_rate_mps=3.5,              # ~700 fpm
        throttle_spool_per_s=0.5,       # ratio per second while throttle-down held
        airborne_decel_kt_per_s=0.6,    # at idle throttle
        ground_decel_kt_per_s=2.0,      # wheel braking/friction
        reverse_decel_kt_per_s=4.0,     # additional with reverse thrust
        clock=None,
    ):
        self.airspeed_kt = float(airspeed_kt)
        self.altitude_agl_m = float(altitude_agl_m)
        self.throttle_ratio = float(throttle_ratio)
        self.flap_angle_deg = float(flap_angle_deg)
        self.gear_deploy_ratio = float(gear_deploy_ratio)
        self.on_ground = self.altitude_agl_m <= 0.0

        self.sink_rate_mps = float(sink_rate_mps)
        self.throttle_spool_per_s = float(throttle_spool_per_s)
        self.airborne_decel_kt_per_s = float(airborne_decel_kt_per_s)
        self.ground_decel_kt_per_s = float(ground_decel_kt_per_s)
        self.reverse_decel_kt_per_s = float(reverse_decel_kt_per_s)

        self.throttle_down_held = False
        self.reverse_held = False
        self.hold_calls: list[str] = []

        self.clock = clock
        self._last_time = self.clock() if self.clock else None

    # -------------------------
    # Simulation
    # -------------------------

    def step(self, dt: float) -> None:
        # Advance simulation by dt seconds.
        if dt <= 0.0:
            return

        if self.throttle_down_held:
            self.throttle_ratio = max(0.0, self.throttle_ratio - self.throttle_spool_per_s * dt)

        if not self.on_ground:
            self.altitude_agl_m -= self.sink_rate_mps * dt
            if self.altitude_agl_m <= 0.0:
                self.altitude_agl_m = 0.0
                self.on_ground = True

        if self.on_ground:
            decel = self.ground_decel_kt_per_s
            if self.reverse_held:
                decel += self.reverse_decel_kt_per_s
        else:
            # Residual thrust holds speed, idle lets it bleed off
            decel = self.airborne_decel_kt_per_s * (1.0 - self.throttle_ratio)

        self.airspeed_kt = max(0.0, self.airspeed_kt - decel * dt)

    def update(self) -> None:
        # Advance simulation using the injected clock.
        if not self.clock:
            raise RuntimeError(
                "LandingRolloutSimulator.update() requires a clock; use step(dt) instead."
            )

        now = self.clock()
        dt = now - (self._last_time if self._last_time is not None else now)
        self._last_time = now
        self.step(dt)

    def sync_clock(self) -> None:
        # Discard time elapsed while the simulation was not being updated.
        if self.clock:
            self._last_time = self.clock()

    def set_altitude_agl_m(self, altitude_m: float) -> None:
        self.altitude_agl_m = max(0.0, float(altitude_m))
        self.on_ground = self.altitude_agl_m <= 0.0

    # -------------------------
    # Sensor gateway
    # -------------------------

    def read_throttle_ratio(self) -> float:
        return self.throttle_ratio

    def read_indicated_airspeed(self) -> float:
        return self.airspeed_kt

    def read_all_wheels_on_ground(self) -> bool:
        return self.on_ground

    def read_flap_angle(self) -> float:
        return self.flap_angle_deg

    def read_gear_deploy_ratio(self) -> float:
        return self.gear_deploy_ratio

    def read_altitude_above_ground(self) -> float:
        return self.altitude_agl_m

    # -------------------------
    # Actuator gateway
    # -------------------------

    def begin_throttle_reduction_hold(self) -> None:
        self.hold_calls.append("begin_throttle_reduction")
        self.throttle_down_held = True

    def end_throttle_reduction_hold(self) -> None:
        self.hold_calls.append("end_throttle_reduction")
        self.throttle_down_held = False

    def begin_reverse_thrust_hold(self) -> None:
        self.hold_calls.append("begin_reverse_thrust")
        self.reverse_held = True

    def end_reverse_thrust_hold(self) -> None:
        self.hold_calls.append("end_reverse_thrust")
        self.reverse_held = False
