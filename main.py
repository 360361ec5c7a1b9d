#!/usr/bin/env python3
import logging
import signal
import time
from pathlib import Path
from threading import Event

from app_context import AppContext
from cli_support import ControlLoop, StateAnnunciator
from hold_recorder import HoldRecorder
from landing_throttle_manager import LandingThrottleManager
from operator_interface import (
    PLUGIN_NAME,
    MenuItem,
    OperatorInterface,
    version_string,
)
from sims.rollout_simulator import LandingRolloutSimulator
from throttle_configuration import ThrottleManagerConfiguration


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def setup_signal_handlers(ctx: AppContext):
    def _handle_shutdown(signum, frame):
        logging.info("Shutdown signal received (%s)", signum)
        ctx.shutdown()

    signal.signal(signal.SIGINT, _handle_shutdown)
    signal.signal(signal.SIGTERM, _handle_shutdown)


def speak(text: str) -> None:
    print(f"[VOICE] {text}")


def initialize(
    config: ThrottleManagerConfiguration | None = None,
    clock=time.monotonic,
    hold_log: str | Path | None = None,
    simulator: LandingRolloutSimulator | None = None,
    on_tick=None,
) -> AppContext:
    logging.info("%s version %s", PLUGIN_NAME, version_string())

    config = config or ThrottleManagerConfiguration()
    config.validate()

    sim = simulator or LandingRolloutSimulator(clock=clock)

    recorder = None
    if hold_log is not None:
        recorder = HoldRecorder(filepath=Path(hold_log), clock=clock)

    manager = LandingThrottleManager(
        config=config,
        sensors=sim,
        actuators=sim,
        speak=speak,
        clock=clock,
        hold_recorder=recorder,
    )

    return AppContext(
        manager=manager,
        config=config,
        clock=clock,
        shutdown_event=Event(),
        simulator=sim,
        operator=OperatorInterface(manager),
        loop=ControlLoop(manager, simulator=sim, period_s=config.poll_interval_s, on_tick=on_tick),
        recorder=recorder,
    )


def command_loop(ctx: AppContext):
    prompt = (
        "[e]=enable [x]=stop and disable [b]=enable button "
        "[state]=print state [q]=quit > "
    )

    while not ctx.shutdown_event.is_set():
        try:
            cmd = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            ctx.shutdown()
            break

        if cmd == "e":
            ctx.operator.handle_menu(MenuItem.ENABLE)

        elif cmd == "x":
            ctx.operator.handle_menu(MenuItem.STOP)

        elif cmd == "b":
            ctx.operator.handle_enable_command(0)

        elif cmd == "state":
            sim = ctx.simulator
            print(
                f"{ctx.manager.state.name} IAS={sim.airspeed_kt:.1f}kt "
                f"AGL={sim.altitude_agl_m:.1f}m THR={sim.throttle_ratio:.2f} "
                f"ground={sim.on_ground}"
            )

        elif cmd == "q":
            ctx.shutdown()
            break

        elif cmd == "":
            continue

        else:
            print("Unknown command.")

    logging.info("Command loop terminated")


def main():
    setup_logging()
    ctx = initialize(hold_log="hold_log.csv", on_tick=StateAnnunciator())
    setup_signal_handlers(ctx)

    logging.info("Starting control loop (tick=%.3fs)", ctx.config.poll_interval_s)
    ctx.loop.start()

    command_loop(ctx)

    logging.info("Main loop terminated")


if __name__ == "__main__":
    main()
