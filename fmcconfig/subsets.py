"""Domino-reduction subsets and lookup by name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Subset:
    """A DR subset, described by its corner and edge case counts."""

    discriminator: str | None
    generator: str
    corners: int
    edges: int
    qt_corners: int
    qt: int

    def name(self) -> str:
        """Return the display name, e.g. ``4a1 4e``."""
        tag = self.discriminator if self.discriminator is not None else "c"
        return f"{self.corners}{tag}{self.qt_corners} {self.edges}e"

    def __str__(self) -> str:
        return self.name()


DR_SUBSETS: tuple[Subset, ...] = (
    Subset(None, "", 0, 0, 0, 0),
    Subset(None, "U R2 F2 R2 U", 0, 2, 0, 2),
    Subset(None, "U R2 L2 D", 0, 4, 0, 2),
    Subset(None, "U R2 L2 F2 R2 F2 D", 0, 6, 0, 2),
    Subset(None, "U R2 L2 F2 B2 U", 0, 8, 0, 2),
    Subset("a", "U R2 L2 U F2 B2 D", 4, 0, 1, 3),
    Subset("a", "U R2 L2 U R2 U", 4, 2, 1, 3),
    Subset("a", "U", 4, 4, 1, 1),
    Subset("b", "U R2 F2 R2 F2 U", 4, 0, 2, 2),
    Subset("b", "U R2 U", 4, 2, 2, 2),
    Subset("b", "U R2 F2 U", 4, 4, 2, 2),
    Subset("a", "U R2 U R2 B2 R2 U' R2 U", 4, 0, 2, 2),
    Subset("a", "D B2 D' F2 B2 D' F2 D", 4, 2, 2, 2),
    Subset("a", "U R2 U2 F2 U", 4, 4, 2, 2),
    Subset(None, "U F2 U2 R2 B2 U' L2 B2 D", 2, 0, 3, 3),
    Subset(None, "U R2 U R2 U", 2, 2, 3, 3),
    Subset(None, "U L2 U F2 U", 2, 4, 3, 3),
    Subset(None, "U L2 D R2 F2 B2 U", 2, 6, 3, 3),
    Subset(None, "U B2 L2 U B2 L2 U2 B2 D", 2, 8, 3, 3),
    Subset(None, "U R2 F2 U R2 U2 F2 U", 4, 0, 3, 3),
    Subset(None, "U B2 U R2 U2 F2 D", 4, 2, 3, 3),
    Subset(None, "U B2 U' L2 U2 B2 D", 4, 4, 3, 3),
    Subset(None, "U R2 U2 F2 U' R2 U2 R2 F2 U", 0, 0, 3, 3),
    Subset(None, "U R2 U2 F2 U R2 U2 F2 U", 0, 2, 3, 3),
    Subset(None, "U R2 U2 F2 U R2 U2 R2 B2 D", 0, 4, 3, 3),
    Subset(None, "U L2 U2 F2 U B2 U2 R2 U", 0, 6, 3, 3),
    Subset(None, "U R2 U2 F2 U' L2 U2 R2 F2 D", 0, 8, 3, 3),
    Subset(None, "U L2 D' R2 D L2 U", 2, 0, 4, 4),
    Subset(None, "U R2 U' R2 U R2 U", 2, 2, 4, 4),
    Subset(None, "U R2 U' L2 D R2 D", 2, 4, 4, 4),
    Subset(None, "U' B2 D' L2 B2 U' R2 U", 2, 6, 4, 4),
    Subset(None, "U R2 L2 B2 U R2 U' F2 U", 2, 8, 4, 4),
    Subset(None, "U R2 U R2 U2 B2 U B2 U", 0, 0, 4, 4),
    Subset(None, "U L2 U B2 U2 R2 U L2 U", 0, 2, 4, 4),
    Subset(None, "U B2 U F2 U2 R2 U R2 D", 0, 4, 4, 4),
    Subset(None, "U' R2 U L2 U2 L2 B2 U' B2 D", 0, 6, 4, 4),
    Subset(None, "U' R2 U R2 U2 B2 U F2 R2 L2 U", 0, 8, 4, 4),
    Subset(None, "U R2 U B2 U2 R2 F2 B2 U' B2 U", 4, 0, 4, 4),
    Subset(None, "U' F2 U F2 U2 R2 U' R2 U", 4, 2, 4, 4),
    Subset(None, "U' B2 U F2 U2 R2 U' R2 U", 4, 4, 4, 4),
    Subset(None, "U L2 U L2 U' L2 B2 U' B2 U", 2, 0, 5, 5),
    Subset(None, "U L2 U R2 U' R2 U R2 U", 2, 2, 5, 5),
    Subset(None, "D R2 U L2 D' R2 D L2 U", 2, 4, 5, 5),
    Subset(None, "U L2 U F2 U' R2 U B2 U", 2, 6, 5, 5),
    Subset(None, "U R2 U L2 F2 U B2 U' L2 U", 2, 8, 5, 5),
    Subset(None, "U' L2 U L2 U' R2 U R2 U", 4, 0, 5, 5),
    Subset(None, "U' R2 U F2 U' F2 U B2 D", 4, 2, 5, 5),
    Subset(None, "U' R2 U F2 U' F2 U F2 U", 4, 4, 5, 5),
)


def parse_subset(text: str) -> Subset:
    """Return the subset whose full name equals ``text``."""
    for subset in DR_SUBSETS:
        if subset.name() == text:
            return subset
    raise ValueError(f"unknown DR subset: {text!r}")


def expand_subset_name(name: str) -> list[tuple[Subset, int]]:
    """Return every subset matching ``name`` along with its index.

    A name of two or more characters matches subsets whose full name starts
    with it; a single digit matches subsets by their corner quarter-turn count.
    """
    if len(name.encode("utf-8")) >= 2:
        return [(s, i) for i, s in enumerate(DR_SUBSETS) if s.name().startswith(name)]
    if len(name) == 1 and name.isascii() and name.isdigit():
        qt = int(name)
        return [(s, i) for i, s in enumerate(DR_SUBSETS) if s.qt_corners == qt]
    return []