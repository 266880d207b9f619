"""Persistent, namespaced key/value settings and chained on/off toggles."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

PREFIX = "mallard-"


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def _decode(raw: Any, default: Any) -> Any:
    """Turn a decoded JSON value into the type of ``default``; raise on mismatch."""
    if isinstance(default, Enum):
        return type(default)(raw)
    if isinstance(default, bool):
        if not isinstance(raw, bool):
            raise ValueError(f"expected a boolean, got {raw!r}")
        return raw
    if isinstance(default, int):
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError(f"expected an integer, got {raw!r}")
        return raw
    if isinstance(default, str):
        if not isinstance(raw, str):
            raise ValueError(f"expected a string, got {raw!r}")
        return raw
    if isinstance(default, list):
        if not isinstance(raw, list):
            raise ValueError(f"expected a list, got {raw!r}")
        if default:
            return [_decode(item, default[0]) for item in raw]
        return list(raw)
    return raw


class Setting:
    """One stored value with a default used whenever nothing valid is stored."""

    def __init__(self, backing: MutableMapping[str, str], key: str, default: Any) -> None:
        self._backing = backing
        self.key = key
        self.default = default

    def get(self) -> Any:
        """Return the stored value, or the default if it is missing or unreadable."""
        text = self._backing.get(self.key)
        if text is None:
            return copy.copy(self.default)
        try:
            return _decode(json.loads(text), self.default)
        except (ValueError, TypeError):
            return copy.copy(self.default)

    def set(self, value: Any) -> None:
        """Store ``value`` as JSON."""
        self._backing[self.key] = json.dumps(_encode(value))

    def clear(self) -> None:
        """Remove the stored value so that the default applies again."""
        self._backing.pop(self.key, None)


class Store:
    """Settings kept in a string mapping under namespaced keys."""

    def __init__(self, backing: MutableMapping[str, str] | None = None) -> None:
        self._backing: MutableMapping[str, str] = {} if backing is None else backing

    def setting(self, key: str, default: Any) -> Setting:
        """Return the setting for ``key``, moving a value kept under the bare key."""
        namespaced = f"{PREFIX}{key}"
        if namespaced not in self._backing and key in self._backing:
            self._backing[namespaced] = self._backing.pop(key)
        return Setting(self._backing, namespaced, default)

    def items(self) -> dict[str, str]:
        """Return every namespaced entry with its raw stored text."""
        return {k: v for k, v in self._backing.items() if k.startswith(PREFIX)}

    def replace(self, values: dict[str, str]) -> None:
        """Drop everything stored and store ``values`` as given."""
        self._backing.clear()
        self._backing.update(values)


@dataclass(frozen=True)
class Toggle:
    """An on/off state read and written through a pair of callables."""

    getter: Callable[[], bool]
    setter: Callable[[bool], None]

    def get(self) -> bool:
        return self.getter()

    def set(self, state: bool) -> None:
        self.setter(state)


def build_toggle_chain(store: Store, save_key: str, length: int) -> list[Toggle]:
    """Build toggles where enabling one enables all before it and disabling
    one disables all after it."""
    settings = [store.setting(f"{save_key}-{i}", True) for i in range(length)]

    def make_setter(index: int) -> Callable[[bool], None]:
        def setter(state: bool) -> None:
            targets = settings[: index + 1] if state else settings[index:]
            for setting in targets:
                setting.set(bool(state))

        return setter

    return [Toggle(setting.get, make_setter(i)) for i, setting in enumerate(settings)]