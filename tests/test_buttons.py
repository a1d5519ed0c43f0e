import pytest

from menu_bot.src.buttons import (
    BTN_ADMIN_PANEL, BTN_BACK, BTN_FORMAT, BTN_SETTINGS, BTN_SUBSCRIPTION,
    DEFAULT_REGISTRY, MENU_BUTTONS, SYSTEM_BUTTONS, ButtonKind, ButtonRegistry,
)


@pytest.mark.parametrize("label", sorted(SYSTEM_BUTTONS))
def test_registered_labels_are_reserved(label):
    assert DEFAULT_REGISTRY.classify(label) is ButtonKind.SYSTEM_RESERVED


@pytest.mark.parametrize("text", [None, "", "hello", "admin panel", " Back", "Back ", "https://example.com/v/1"])
def test_other_text_is_ordinary(text):
    assert DEFAULT_REGISTRY.classify(text) is ButtonKind.ORDINARY


def test_classify_is_stable():
    for text in (BTN_FORMAT, "hello", None):
        assert DEFAULT_REGISTRY.classify(text) is DEFAULT_REGISTRY.classify(text)


def test_admin_trigger():
    assert DEFAULT_REGISTRY.is_admin_trigger(BTN_ADMIN_PANEL)
    assert not DEFAULT_REGISTRY.is_admin_trigger(BTN_SETTINGS)
    assert not DEFAULT_REGISTRY.is_admin_trigger(None)


def test_trigger_must_be_registered():
    with pytest.raises(ValueError):
        ButtonRegistry(labels=frozenset({"A", "B"}), admin_trigger="C")


def test_menu_buttons_are_reserved():
    assert MENU_BUTTONS == {BTN_ADMIN_PANEL, BTN_SETTINGS, BTN_FORMAT, BTN_SUBSCRIPTION, BTN_BACK}
    assert MENU_BUTTONS <= SYSTEM_BUTTONS
