#!/usr/bin/env python3

import time

from cli_support import StateAnnunciator
from landing_throttle_manager import LandingThrottleManager
from main import initialize, setup_logging
from operator_interface import CommandPhase, MenuItem
from sims.rollout_simulator import LandingRolloutSimulator

# Simulator fields settable from the shell: name -> (attribute, unit)
SETTABLE = {
    "ias": ("airspeed_kt", "kt"),
    "thr": ("throttle_ratio", ""),
    "flaps": ("flap_angle_deg", "deg"),
    "gear": ("gear_deploy_ratio", ""),
}


def _print_status(manager: LandingThrottleManager, sim: LandingRolloutSimulator) -> None:
    print("\n=== STATUS ===")
    print(f"State: {manager.state.name}  ({manager.time_in_state_s():.2f}s in state)")
    print(f"DeactivationRequested: {manager.deactivation_requested}")
    print(f"IAS_kt: {sim.airspeed_kt:.1f}  AGL_m: {sim.altitude_agl_m:.1f}  OnGround: {sim.on_ground}")
    print(f"ThrottleRatio: {sim.throttle_ratio:.3f}  Flaps_deg: {sim.flap_angle_deg:.1f}  Gear: {sim.gear_deploy_ratio:.3f}")
    for hold in manager.holds:
        print(f"Hold {hold.name}: active={hold.active} begun={hold.begin_count} ended={hold.end_count}")
    print(f"Ticks: {manager.tick_count}  LateTicks: {manager.late_tick_count}  MaxTickInterval_s: {manager.max_tick_interval_s}")
    print("=============\n")


def _print_help() -> None:
    print(
        """
Commands
  help                         Print help
  q                            Quit

Loop control
  run [period_s]               Start background tick loop
  stop                         Stop background loop
  step [n]                     Run n ticks, advancing the simulator one period each (default 1)
  period <seconds>             Set loop period (min 0.01)

Operator intents
  enable                       Menu "Enable"
  disable                      Menu "Stop and disable"
  button                       Enable command, button-down phase

Simulator inputs
  set ias|thr|flaps|gear <v>   Force a simulator value
  alt <metres>                 Set height above ground (0 = touchdown)

State / diagnostics
  state                        Print manager state name
  status                       Print full status block
"""
    )


def main() -> int:
    setup_logging()
    annunciator = StateAnnunciator()
    ctx = initialize(clock=time.monotonic, hold_log="hold_log.csv", on_tick=annunciator)
    manager, sim, loop, operator = ctx.manager, ctx.simulator, ctx.loop, ctx.operator

    _print_help()
    while True:
        try:
            cmd = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not cmd:
            continue

        parts = cmd.split()
        op = parts[0].lower()

        if op in ("q", "quit", "exit"):
            break

        if op in ("help", "?"):
            _print_help()
            continue

        if op == "run":
            if len(parts) >= 2:
                loop.set_period(float(parts[1]))
            loop.start()
            print(f"Loop running @ {loop.period_s:.3f}s")
            continue

        if op == "stop":
            loop.stop()
            print("Loop stopped")
            continue

        if op == "period":
            if len(parts) != 2:
                print("Usage: period <seconds>")
                continue
            loop.set_period(float(parts[1]))
            print(f"Loop period set to {loop.period_s:.3f}s")
            continue

        if op == "step":
            n = int(parts[1]) if len(parts) >= 2 else 1
            loop.step(n)
            print(f"Stepped {n} ticks")
            continue

        if op == "enable":
            result = operator.handle_menu(MenuItem.ENABLE)
            print(f"Enable accepted: {result.accepted}")
            annunciator(manager)
            continue

        if op == "disable":
            recorded = operator.handle_menu(MenuItem.STOP)
            print(f"Deactivation requested: {recorded}")
            continue

        if op == "button":
            operator.handle_enable_command(CommandPhase.BEGIN)
            annunciator(manager)
            continue

        if op == "set":
            if len(parts) != 3 or parts[1].lower() not in SETTABLE:
                print("Usage: set ias|thr|flaps|gear <value>")
                continue
            try:
                value = float(parts[2])
            except ValueError:
                print("Invalid value.")
                continue
            attr, unit = SETTABLE[parts[1].lower()]
            setattr(sim, attr, value)
            print(f"{parts[1].lower()} set to {value} {unit}".rstrip())
            continue

        if op == "alt":
            if len(parts) != 2:
                print("Usage: alt <metres>")
                continue
            try:
                sim.set_altitude_agl_m(float(parts[1]))
            except ValueError:
                print("Invalid altitude.")
                continue
            print(f"Altitude set to {sim.altitude_agl_m:.1f} m (on ground: {sim.on_ground})")
            continue

        if op == "state":
            print(manager.state.name)
            continue

        if op == "status":
            _print_status(manager, sim)
            continue

        print("Unknown command. Type 'help'.")

    ctx.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
