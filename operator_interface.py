"""
Title: Operator Interface (Menu and Enable Command)
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-15
Version: 1.0

Purpose:
Routes the two operator intents into the Landing Throttle Manager: the
plugin menu ("Enable", "Stop and disable") and the custom enable command that
can be bound to a joystick or VR controller button.

Targeted Requirements:
- LTM-FR007: Single-action activation from a bindable command.
- LTM-FR005: Operator stop request from the menu.

Scope and Limitations:
- Menu construction and command registration belong to the host shell; this
  module only defines the identifiers and the handlers it calls back.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.
"""

import logging
from enum import IntEnum

from landing_throttle_manager import ActivationResult, LandingThrottleManager

logger = logging.getLogger(__name__)

PLUGIN_NAME = "Landing Throttle Manager"
PLUGIN_SIGNATURE = "britishideas.assistants.landingthrottlemanager"
PLUGIN_DESCRIPTION = "Handles the throttle and reverse thrust on landing for VR users"
PLUGIN_VERSION = (1, 0, 0)

ENABLE_COMMAND_NAME = f"{PLUGIN_NAME}/Enable"
ENABLE_COMMAND_DESCRIPTION = f"Enable the {PLUGIN_NAME}"


class MenuItem(IntEnum):
    ENABLE = 1
    STOP = 2


MENU_ITEM_TITLES = {
    MenuItem.ENABLE: "Enable",
    MenuItem.STOP: "Stop and disable",
}


class CommandPhase(IntEnum):
    BEGIN = 0
    CONTINUE = 1
    END = 2


def version_string() -> str:
    return ".".join(str(part) for part in PLUGIN_VERSION)


class OperatorInterface:
    def __init__(self, manager: LandingThrottleManager):
        self._manager = manager

    def handle_menu(self, item) -> ActivationResult | bool | None:
        try:
            item = MenuItem(int(item))
        except ValueError:
            logger.warning("Ignoring unknown menu item %r", item)
            return None

        if item == MenuItem.ENABLE:
            return self._manager.request_activate()
        return self._manager.request_deactivate()

    def handle_enable_command(self, phase) -> bool:
        # Executed once on button down; held/released phases are ignored.
        if int(phase) == CommandPhase.BEGIN:
            self._manager.request_activate()

        # Stop further processing of this command by the host
        return False
