"""User preferences: advanced mode, relative step length, extra triggers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from fmcconfig.storage import Setting, Store

_MOVE_PATTERN = re.compile(r"\s*(\(|\)|[UDFBLR](?:2'|2|')?)")


def _parse_algorithm(text: str) -> tuple[list[str], list[str]]:
    """Split move notation into normal and inverse (parenthesised) moves."""
    normal: list[str] = []
    inverse: list[str] = []
    in_inverse = False
    pos = 0
    stripped = text.rstrip()
    while pos < len(stripped):
        match = _MOVE_PATTERN.match(stripped, pos)
        if match is None:
            raise ValueError(f"invalid move notation: {text!r}")
        part = match.group(1)
        pos = match.end()
        if part == "(":
            if in_inverse:
                raise ValueError(f"nested parentheses in {text!r}")
            in_inverse = True
        elif part == ")":
            if not in_inverse:
                raise ValueError(f"unbalanced parentheses in {text!r}")
            in_inverse = False
        else:
            move = part[:2] if part.endswith("2'") else part
            (inverse if in_inverse else normal).append(move)
    if in_inverse:
        raise ValueError(f"unbalanced parentheses in {text!r}")
    return normal, inverse


def is_valid_trigger(text: str) -> bool:
    """Tell whether ``text`` is a usable DR trigger.

    A trigger has only normal moves, at least one move, starts with ``R``
    and ends with ``R`` or ``L``.
    """
    try:
        normal, inverse = _parse_algorithm(text)
    except ValueError:
        return False
    if inverse or not normal:
        return False
    return normal[0] == "R" and normal[-1] in ("R", "L")


def _canonical(text: str) -> str:
    normal, inverse = _parse_algorithm(text)
    parts = list(normal)
    if inverse:
        parts.append("(" + " ".join(inverse) + ")")
    return " ".join(parts)


@dataclass
class SettingsState:
    """Preferences shared by all steps."""

    advanced: Setting
    relative_step_length: Setting
    triggers: Setting

    @classmethod
    def from_store(cls, store: Store) -> SettingsState:
        return cls(
            advanced=store.setting("settings-advanced", False),
            relative_step_length=store.setting("settings-rel-step-len", True),
            triggers=store.setting("settings-additional-triggers", []),
        )

    def is_advanced(self) -> bool:
        return bool(self.advanced.get())

    def is_relative(self) -> bool:
        return bool(self.relative_step_length.get())

    def additional_triggers(self) -> list[str]:
        """Return the user's extra triggers as move strings."""
        return [str(t) for t in self.triggers.get()]

    def add_trigger(self, text: str) -> bool:
        """Add a trigger; return whether it was new. Raise on an invalid trigger."""
        if not is_valid_trigger(text):
            raise ValueError(f"invalid trigger: {text!r}")
        alg = _canonical(text)
        triggers = self.additional_triggers()
        if alg in triggers:
            return False
        triggers.append(alg)
        self.triggers.set(triggers)
        return True

    def remove_trigger(self, text: str) -> None:
        """Remove the trigger written as ``text``."""
        self.triggers.set([t for t in self.additional_triggers() if t != text])