import pytest

from menu_bot.src.buttons import (
    BTN_ADMIN_PANEL, BTN_BACK, BTN_FORMAT, BTN_STATS, BTN_SUBSCRIPTION,
    DEFAULT_REGISTRY, SYSTEM_BUTTONS, ButtonRegistry,
)
from menu_bot.src.utils.access import AdminIds
from menu_bot.src.utils.gate import DispatchGate, Route, route_text

from conftest import ADMIN_ID, USER_ID, make_message


@pytest.mark.parametrize("label", sorted(SYSTEM_BUTTONS - {BTN_ADMIN_PANEL}))
def test_reserved_labels_are_suppressed(label):
    assert route_text(label, DEFAULT_REGISTRY) is Route.SUPPRESSED


def test_admin_trigger_goes_to_admin_panel():
    assert route_text(BTN_ADMIN_PANEL, DEFAULT_REGISTRY) is Route.ADMIN_PANEL


@pytest.mark.parametrize("text", [None, "hello", "/unknown", "admin panel"])
def test_ordinary_text_goes_to_default(text):
    assert route_text(text, DEFAULT_REGISTRY) is Route.DEFAULT


def test_scenario_admin_clicks_admin_panel(gate):
    decision = gate.decide(make_message(BTN_ADMIN_PANEL, user_id=ADMIN_ID))
    assert decision.route is Route.ADMIN_PANEL
    assert decision.is_admin


def test_scenario_non_admin_clicks_admin_panel(gate):
    decision = gate.decide(make_message(BTN_ADMIN_PANEL, user_id=USER_ID))
    assert decision.route is Route.ADMIN_PANEL
    assert not decision.is_admin


def test_scenario_non_admin_other_label(gate):
    decision = gate.decide(make_message(BTN_SUBSCRIPTION, user_id=USER_ID))
    assert decision.route is Route.SUPPRESSED


def test_scenario_admin_plain_text(gate):
    decision = gate.decide(make_message("hello", user_id=ADMIN_ID))
    assert decision.route is Route.DEFAULT
    assert decision.is_admin
    assert decision.sender_id == ADMIN_ID


def test_admin_reserved_label_is_still_suppressed(gate):
    assert gate.decide(make_message(BTN_STATS, user_id=ADMIN_ID)).route is Route.SUPPRESSED


def test_no_sender_with_trigger(gate):
    m = make_message(BTN_ADMIN_PANEL, user_id=None, chat_id=ADMIN_ID, chat_type="channel")
    decision = gate.decide(m)
    assert decision.route is Route.ADMIN_PANEL
    assert decision.is_admin is False
    assert decision.sender_id is None


def test_attachment_only_message_goes_to_default(gate):
    assert gate.decide(make_message(None, user_id=USER_ID)).route is Route.DEFAULT


def test_route_ignores_admin_list():
    m = make_message(BTN_BACK, user_id=ADMIN_ID)
    nobody = DispatchGate(DEFAULT_REGISTRY, AdminIds.parse(""))
    everybody = DispatchGate(DEFAULT_REGISTRY, AdminIds.parse(str(ADMIN_ID)))
    assert nobody.decide(m).route is everybody.decide(m).route is Route.SUPPRESSED


def test_custom_registry_trigger():
    registry = ButtonRegistry(labels=frozenset({BTN_FORMAT, "Panel"}), admin_trigger="Panel")
    assert route_text("Panel", registry) is Route.ADMIN_PANEL
    assert route_text(BTN_FORMAT, registry) is Route.SUPPRESSED
    assert route_text(BTN_ADMIN_PANEL, registry) is Route.DEFAULT


def test_decide_is_repeatable(gate):
    m = make_message(BTN_ADMIN_PANEL, user_id=USER_ID)
    assert gate.decide(m) == gate.decide(m)
