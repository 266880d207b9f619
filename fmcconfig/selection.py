"""Selection helpers for DR subsets and DR triggers."""

from __future__ import annotations

from collections.abc import Iterable

from fmcconfig.subsets import DR_SUBSETS

DEFAULT_TRIGGER_OPTIONS = (
    "R",
    "R U2 F2 R",
    "R F2 U2 R",
    "R U2 R",
    "R F2 R",
    "R U R",
    "R U' R",
    "R L",
    "R U L",
    "R U' L",
)


def add_subset(selected: Iterable[str], subset: str) -> list[str]:
    """Return ``selected`` with ``subset`` added.

    A three-character name such as ``4a1`` stands for every subset whose full
    name starts with it; each of those is added. Names already present are
    not added twice.
    """
    result = list(selected)
    if len(subset) == 3:
        candidates = [s.name() for s in DR_SUBSETS if s.name().startswith(subset)]
    else:
        candidates = [subset]
    for name in candidates:
        if name not in result:
            result.append(name)
    return result


def remove_subset(selected: Iterable[str], prefix: str) -> list[str]:
    """Return ``selected`` without the subsets whose name starts with ``prefix``."""
    return [name for name in selected if not name.startswith(prefix)]


def display_subsets(selected: Iterable[str], advanced: bool) -> list[str]:
    """Return the distinct names to show for ``selected``.

    In advanced mode full names are shown; otherwise only the corner part
    before the space, so ``4a1 2e`` and ``4a1 4e`` both show as ``4a1``.
    """
    shown: list[str] = []
    for name in selected:
        if not advanced:
            corner, sep, _ = name.partition(" ")
            if not sep:
                raise ValueError(f"malformed subset name: {name!r}")
            name = corner
        if name not in shown:
            shown.append(name)
    return shown


def trigger_options(additional: Iterable[str]) -> list[str]:
    """Return the default triggers plus ``additional``, sorted and deduplicated."""
    return sorted(set(DEFAULT_TRIGGER_OPTIONS) | set(additional))