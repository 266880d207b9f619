"""Per-step user settings backed by a :class:`Store`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fmcconfig.steps import CubeAxis, NissSwitchType
from fmcconfig.storage import Setting, Store, Toggle

ALL_AXES = (CubeAxis.UD, CubeAxis.FB, CubeAxis.LR)
DEFAULT_DR_TRIGGERS = ("R", "R U2 R", "R F2 R", "R U R", "R U' R")


class SelectableAxis(Enum):
    """An axis as offered for selection."""

    UD = "UD"
    FB = "FB"
    LR = "LR"

    @classmethod
    def from_axis(cls, axis: CubeAxis) -> SelectableAxis:
        return cls(axis.value)

    def to_axis(self) -> CubeAxis:
        return CubeAxis(self.value)

    def __str__(self) -> str:
        return self.value


def _restore(defaults: list[tuple[Setting, object]], cleared: list[Setting]) -> None:
    for setting, value in defaults:
        setting.set(value)
    for setting in cleared:
        setting.clear()


@dataclass
class EOConfig:
    enabled: Toggle
    min_abs: Setting
    max_abs: Setting
    niss: Setting
    variants: Setting

    @classmethod
    def from_store(cls, store: Store, enabled: Toggle) -> EOConfig:
        return cls(
            enabled=enabled,
            min_abs=store.setting("eo-min-abs", 0),
            max_abs=store.setting("eo-max-abs", 5),
            niss=store.setting("eo-niss", NissSwitchType.ALWAYS),
            variants=store.setting("eo-variants", list(ALL_AXES)),
        )

    def reset(self) -> None:
        _restore(
            [
                (self.min_abs, 0),
                (self.max_abs, 5),
                (self.niss, NissSwitchType.ALWAYS),
                (self.variants, list(ALL_AXES)),
            ],
            [self.min_abs, self.max_abs, self.niss, self.variants],
        )


@dataclass
class RZPConfig:
    min_abs: Setting
    max_abs: Setting
    min_rel: Setting
    max_rel: Setting
    niss: Setting

    @classmethod
    def from_store(cls, store: Store) -> RZPConfig:
        return cls(
            min_rel=store.setting("rzp-min-rel", 0),
            max_rel=store.setting("rzp-max-rel", 3),
            min_abs=store.setting("rzp-min-abs", 0),
            max_abs=store.setting("rzp-max-abs", 6),
            niss=store.setting("rzp-niss", NissSwitchType.NEVER),
        )

    def reset(self) -> None:
        _restore(
            [
                (self.min_rel, 0),
                (self.max_rel, 3),
                (self.min_abs, 0),
                (self.max_abs, 6),
                (self.niss, NissSwitchType.NEVER),
            ],
            [self.min_abs, self.max_abs, self.min_rel, self.max_rel, self.niss],
        )


@dataclass
class DRConfig:
    enabled: Toggle
    min_abs: Setting
    max_abs: Setting
    min_rel: Setting
    max_rel: Setting
    niss: Setting
    variants: Setting
    triggers: Setting
    subsets: Setting
    enforce_triggers: Setting

    @classmethod
    def from_store(cls, store: Store, enabled: Toggle) -> DRConfig:
        return cls(
            enabled=enabled,
            min_rel=store.setting("dr-min-rel", 0),
            max_rel=store.setting("dr-max-rel", 12),
            min_abs=store.setting("dr-min-abs", 0),
            max_abs=store.setting("dr-max-abs", 14),
            niss=store.setting("dr-niss", NissSwitchType.BEFORE),
            variants=store.setting("dr-variants", list(ALL_AXES)),
            triggers=store.setting("dr-triggers", list(DEFAULT_DR_TRIGGERS)),
            # The subsets live under an older key name.
            subsets=store.setting("htr-subsets", []),
            enforce_triggers=store.setting("dr-use-triggers", True),
        )

    def reset(self) -> None:
        _restore(
            [
                (self.min_rel, 0),
                (self.max_rel, 12),
                (self.min_abs, 0),
                (self.max_abs, 14),
                (self.niss, NissSwitchType.BEFORE),
                (self.variants, list(ALL_AXES)),
                (self.triggers, list(DEFAULT_DR_TRIGGERS)),
            ],
            [
                self.min_abs,
                self.max_abs,
                self.min_rel,
                self.max_rel,
                self.niss,
                self.variants,
                self.triggers,
                self.subsets,
                self.enforce_triggers,
            ],
        )


@dataclass
class HTRConfig:
    enabled: Toggle
    min_abs: Setting
    max_abs: Setting
    min_rel: Setting
    max_rel: Setting
    niss: Setting
    variants: Setting

    @classmethod
    def from_store(cls, store: Store, enabled: Toggle) -> HTRConfig:
        return cls(
            enabled=enabled,
            min_rel=store.setting("htr-min-rel", 0),
            max_rel=store.setting("htr-max-rel", 12),
            min_abs=store.setting("htr-min-abs", 0),
            max_abs=store.setting("htr-max-abs", 20),
            niss=store.setting("htr-niss", NissSwitchType.BEFORE),
            variants=store.setting("htr-variants", list(ALL_AXES)),
        )

    def reset(self) -> None:
        _restore(
            [
                (self.min_rel, 0),
                (self.max_rel, 12),
                (self.min_abs, 0),
                (self.max_abs, 20),
                (self.niss, NissSwitchType.BEFORE),
                (self.variants, list(ALL_AXES)),
            ],
            [self.min_abs, self.max_abs, self.min_rel, self.max_rel, self.niss, self.variants],
        )


@dataclass
class FRConfig:
    enabled: Toggle
    min_abs: Setting
    max_abs: Setting
    min_rel: Setting
    max_rel: Setting
    niss: Setting
    variants: Setting

    @classmethod
    def from_store(cls, store: Store, enabled: Toggle) -> FRConfig:
        # The absolute bounds share their keys with the finish step.
        return cls(
            enabled=enabled,
            min_rel=store.setting("fr-min-rel", 0),
            max_rel=store.setting("fr-max-rel", 10),
            min_abs=store.setting("fin-min-abs", 0),
            max_abs=store.setting("fin-max-abs", 26),
            niss=store.setting("fr-niss", NissSwitchType.BEFORE),
            variants=store.setting("fr-variants", list(ALL_AXES)),
        )

    def reset(self) -> None:
        _restore(
            [
                (self.min_rel, 0),
                (self.max_rel, 10),
                (self.min_abs, 0),
                (self.max_abs, 26),
                (self.niss, NissSwitchType.BEFORE),
                (self.variants, list(ALL_AXES)),
            ],
            [self.min_abs, self.max_abs, self.min_rel, self.max_rel, self.niss, self.variants],
        )


@dataclass
class FinishConfig:
    enabled: Toggle
    min_abs: Setting
    max_abs: Setting
    min_rel: Setting
    max_rel: Setting
    leave_slice: Setting

    @classmethod
    def from_store(cls, store: Store, enabled: Toggle) -> FinishConfig:
        return cls(
            enabled=enabled,
            min_rel=store.setting("fin-min-rel", 0),
            max_rel=store.setting("fin-max-rel", 10),
            min_abs=store.setting("fin-min-abs", 0),
            max_abs=store.setting("fin-max-abs", 30),
            leave_slice=store.setting("fin-ls", False),
        )

    def reset(self) -> None:
        _restore(
            [
                (self.min_rel, 0),
                (self.max_rel, 10),
                (self.min_abs, 0),
                (self.max_abs, 30),
                (self.leave_slice, False),
            ],
            [self.min_abs, self.max_abs, self.min_rel, self.max_rel, self.leave_slice],
        )