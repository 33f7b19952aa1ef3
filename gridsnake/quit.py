"""Key bindings that end the game when all their keys are held at once."""

from __future__ import annotations

from collections.abc import Collection, Hashable
from dataclasses import dataclass, field

CONTROL_LEFT = "ControlLeft"
KEY_Q = "KeyQ"


@dataclass(frozen=True)
class KeyBinding:
    """One or more keys that must all be held down at the same time."""

    keys: tuple[Hashable, ...]

    def is_pressed(self, pressed: Collection[Hashable]) -> bool:
        """Return True when every key of the binding is in ``pressed``."""
        return all(key in pressed for key in self.keys)


def _to_binding(value: object) -> KeyBinding:
    if isinstance(value, KeyBinding):
        return value
    if isinstance(value, (tuple, list)):
        return KeyBinding(tuple(value))
    return KeyBinding((value,))


@dataclass
class QuitBindings:
    """A set of key bindings, any one of which asks the game to quit."""

    bindings: list[KeyBinding] = field(default_factory=list)

    def add_key_binding(self, *args: object) -> QuitBindings:
        """Add a binding and return ``self`` so calls can be chained.

        A single argument may be a key, a sequence of keys or a
        ``KeyBinding``; several arguments form one multi-key binding.
        """
        if not args:
            raise TypeError("add_key_binding() needs at least one key")
        if len(args) == 1:
            binding = _to_binding(args[0])
        else:
            binding = KeyBinding(tuple(args))
        self.bindings.append(binding)
        return self

    def should_quit(self, pressed: Collection[Hashable]) -> bool:
        """Return True when any binding is fully pressed."""
        return any(binding.is_pressed(pressed) for binding in self.bindings)


def default_quit_bindings() -> QuitBindings:
    """Bindings holding only Ctrl+Q (left control and Q)."""
    return QuitBindings().add_key_binding((CONTROL_LEFT, KEY_Q))