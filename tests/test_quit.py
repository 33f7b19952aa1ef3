import pytest

from gridsnake.quit import (
    CONTROL_LEFT,
    KEY_Q,
    KeyBinding,
    QuitBindings,
    default_quit_bindings,
)


def test_single_key_binding_pressed():
    binding = KeyBinding(("Escape",))
    assert binding.is_pressed({"Escape", "KeyA"}) is True
    assert binding.is_pressed({"KeyA"}) is False


def test_multi_key_binding_needs_all_keys():
    binding = KeyBinding((CONTROL_LEFT, KEY_Q))
    assert binding.is_pressed({CONTROL_LEFT, KEY_Q}) is True
    assert binding.is_pressed({KEY_Q}) is False
    assert binding.is_pressed({CONTROL_LEFT}) is False


def test_default_bindings_require_control_and_q():
    bindings = default_quit_bindings()
    assert bindings.bindings == [KeyBinding((CONTROL_LEFT, KEY_Q))]
    assert bindings.should_quit({CONTROL_LEFT, KEY_Q}) is True
    assert bindings.should_quit({KEY_Q}) is False
    assert bindings.should_quit(set()) is False


def test_add_key_binding_chains_and_adds_single_key():
    bindings = default_quit_bindings()
    result = bindings.add_key_binding(KEY_Q)
    assert result is bindings
    assert bindings.bindings[-1] == KeyBinding((KEY_Q,))
    assert bindings.should_quit({KEY_Q}) is True


def test_add_key_binding_with_several_arguments_is_one_binding():
    bindings = QuitBindings().add_key_binding("ControlLeft", "AltLeft", "KeyQ")
    assert bindings.bindings == [KeyBinding(("ControlLeft", "AltLeft", "KeyQ"))]
    assert bindings.should_quit({"ControlLeft", "AltLeft", "KeyQ"}) is True
    assert bindings.should_quit({"ControlLeft", "KeyQ"}) is False


@pytest.mark.parametrize(
    "value, expected",
    [
        (["KeyA", "KeyB"], KeyBinding(("KeyA", "KeyB"))),
        (("KeyA",), KeyBinding(("KeyA",))),
        (KeyBinding(("KeyZ",)), KeyBinding(("KeyZ",))),
        ("Escape", KeyBinding(("Escape",))),
    ],
)
def test_add_key_binding_conversions(value, expected):
    bindings = QuitBindings().add_key_binding(value)
    assert bindings.bindings == [expected]


def test_add_key_binding_without_keys_raises():
    with pytest.raises(TypeError):
        QuitBindings().add_key_binding()


def test_empty_bindings_never_quit():
    assert QuitBindings().should_quit({CONTROL_LEFT, KEY_Q}) is False