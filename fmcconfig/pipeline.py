"""Turn the per-step user settings into the step list sent to the solver."""

from __future__ import annotations

from collections.abc import Iterable

from fmcconfig.preferences import SettingsState
from fmcconfig.stepconfigs import (
    DRConfig,
    EOConfig,
    FinishConfig,
    FRConfig,
    HTRConfig,
    RZPConfig,
    SelectableAxis,
)
from fmcconfig.steps import CubeAxis, NissSwitchType, StepConfig, StepKind

_QUALITY = 10000
_DEFAULT_VARIANTS = ("ud", "fb", "lr")


def variants_to_strings(variants: Iterable[CubeAxis]) -> list[str]:
    """Return the display names of the given axes, e.g. ``["UD", "FB"]``."""
    return [str(SelectableAxis.from_axis(axis)) for axis in variants]


def _substeps(advanced: bool, variants: Iterable[CubeAxis]) -> list[str]:
    return variants_to_strings(variants) if advanced else list(_DEFAULT_VARIANTS)


def _bounds(relative: bool, min_rel, max_rel, min_abs, max_abs) -> dict[str, int | None]:
    """Relative bounds apply in relative mode, absolute bounds otherwise."""
    return {
        "min": min_rel.get() if relative else None,
        "max": max_rel.get() if relative else None,
        "absolute_min": None if relative else min_abs.get(),
        "absolute_max": None if relative else max_abs.get(),
    }


def get_step_configs(
    eo: EOConfig,
    rzp: RZPConfig,
    dr: DRConfig,
    htr: HTRConfig,
    fr: FRConfig,
    fin: FinishConfig,
    settings: SettingsState,
) -> list[StepConfig]:
    """Build the ordered step configurations for the enabled steps."""
    relative = settings.is_relative()
    advanced = settings.is_advanced()
    steps: list[StepConfig] = []

    if eo.enabled.get():
        steps.append(
            StepConfig(
                kind=StepKind.EO,
                substeps=_substeps(advanced, eo.variants.get()),
                min=eo.min_abs.get(),
                max=eo.max_abs.get(),
                quality=_QUALITY,
                niss=eo.niss.get(),
            )
        )

    if dr.enabled.get():
        params: dict[str, str] = {}
        subsets = dr.subsets.get()
        if subsets:
            params["subsets"] = ",".join(subsets)
        triggers = dr.triggers.get()
        if triggers and dr.enforce_triggers.get():
            steps.append(
                StepConfig(
                    kind=StepKind.RZP,
                    min=rzp.min_rel.get() if relative else 0,
                    max=rzp.max_rel.get() if relative else 3,
                    absolute_min=None if relative else rzp.min_abs.get(),
                    absolute_max=None if relative else rzp.max_abs.get(),
                    quality=_QUALITY,
                    niss=rzp.niss.get(),
                )
            )
            params["triggers"] = ",".join(triggers)
        steps.append(
            StepConfig(
                kind=StepKind.DR,
                substeps=_substeps(advanced, dr.variants.get()),
                **_bounds(relative, dr.min_rel, dr.max_rel, dr.min_abs, dr.max_abs),
                quality=_QUALITY,
                niss=dr.niss.get(),
                params=params,
            )
        )

    if htr.enabled.get():
        steps.append(
            StepConfig(
                kind=StepKind.HTR,
                substeps=_substeps(advanced, htr.variants.get()),
                **_bounds(relative, htr.min_rel, htr.max_rel, htr.min_abs, htr.max_abs),
                quality=_QUALITY,
                niss=htr.niss.get(),
            )
        )

    leave_slice = bool(fin.leave_slice.get())

    if fr.enabled.get():
        steps.append(
            StepConfig(
                kind=StepKind.FRLS if leave_slice else StepKind.FR,
                substeps=_substeps(advanced, fr.variants.get()),
                **_bounds(relative, fr.min_rel, fr.max_rel, fr.min_abs, fr.max_abs),
                quality=_QUALITY,
                niss=fr.niss.get(),
            )
        )

    if fin.enabled.get():
        steps.append(
            StepConfig(
                kind=StepKind.FINLS if leave_slice else StepKind.FIN,
                substeps=list(_DEFAULT_VARIANTS),
                **_bounds(relative, fin.min_rel, fin.max_rel, fin.min_abs, fin.max_abs),
                quality=_QUALITY,
                niss=NissSwitchType.NEVER,
            )
        )

    return steps