# test_operator_interface.py
#
# Unit tests for menu and enable-command dispatch into the manager.

import pytest

from landing_states import LandingState
from operator_interface import (
    ENABLE_COMMAND_NAME,
    MENU_ITEM_TITLES,
    CommandPhase,
    MenuItem,
    OperatorInterface,
    version_string,
)


class FakeManager:
    def __init__(self):
        self.calls: list[str] = []

    def request_activate(self):
        self.calls.append("activate")
        return "activated"

    def request_deactivate(self):
        self.calls.append("deactivate")
        return True


@pytest.fixture
def manager():
    return FakeManager()


@pytest.fixture
def ui(manager):
    return OperatorInterface(manager)


def test_enable_menu_item_activates(ui, manager):
    assert ui.handle_menu(MenuItem.ENABLE) == "activated"
    assert manager.calls == ["activate"]


def test_stop_menu_item_deactivates(ui, manager):
    assert ui.handle_menu(2) is True
    assert manager.calls == ["deactivate"]


def test_unknown_menu_item_ignored(ui, manager):
    assert ui.handle_menu(99) is None
    assert manager.calls == []


def test_enable_command_acts_on_button_down_only(ui, manager):
    for phase in (CommandPhase.BEGIN, CommandPhase.CONTINUE, CommandPhase.END):
        assert ui.handle_enable_command(phase) is False

    assert manager.calls == ["activate"]


def test_plugin_identity():
    assert ENABLE_COMMAND_NAME == "Landing Throttle Manager/Enable"
    assert MENU_ITEM_TITLES[MenuItem.STOP] == "Stop and disable"
    assert version_string() == "1.0.0"


def test_operator_interface_drives_real_manager():
    from landing_throttle_manager import LandingThrottleManager
    from sims.rollout_simulator import LandingRolloutSimulator
    from throttle_configuration import ThrottleManagerConfiguration

    sim = LandingRolloutSimulator()
    m = LandingThrottleManager(ThrottleManagerConfiguration(), sim, sim, clock=lambda: 0.0)
    ui = OperatorInterface(m)

    ui.handle_enable_command(CommandPhase.BEGIN)
    assert m.state == LandingState.STARTING

    ui.handle_menu(MenuItem.STOP)
    assert m.deactivation_requested is True
