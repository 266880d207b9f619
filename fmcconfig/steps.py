"""Step kinds, step configuration and solver request records."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class StepKind(Enum):
    """Kinds of solving steps."""

    EO = "EO"
    RZP = "RZP"
    DR = "DR"
    HTR = "HTR"
    FR = "FR"
    FRLS = "FRLS"
    FIN = "FIN"
    FINLS = "FINLS"

    def __str__(self) -> str:
        return self.value


class NissSwitchType(Enum):
    """When a step may switch between normal and inverse scramble."""

    NEVER = "Never"
    BEFORE = "Before"
    ALWAYS = "Always"

    def __str__(self) -> str:
        return self.value


class CubeAxis(Enum):
    """The three axes of the cube."""

    UD = "UD"
    FB = "FB"
    LR = "LR"

    def __str__(self) -> str:
        return self.value


_U8_FIELDS = ("min", "max", "absolute_min", "absolute_max")


def _check_u8(name: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer between 0 and 255, got {value!r}")
    return value


def _check_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _enum_value(enum_type: type[Enum], value: Any) -> Enum:
    try:
        return enum_type(value)
    except ValueError:
        raise ValueError(f"invalid {enum_type.__name__}: {value!r}") from None


@dataclass
class StepConfig:
    """User-facing configuration of one solving step."""

    kind: StepKind
    substeps: list[str] | None = None
    min: int | None = None
    max: int | None = None
    absolute_min: int | None = None
    absolute_max: int | None = None
    step_limit: int | None = None
    quality: int = 100
    niss: NissSwitchType | None = None
    params: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in _U8_FIELDS:
            _check_u8(name, getattr(self, name))
        if self.step_limit is not None:
            _check_count("step_limit", self.step_limit)
        _check_count("quality", self.quality)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; unset optional fields are omitted."""
        data: dict[str, Any] = {"kind": self.kind.value}
        if self.substeps is not None:
            data["substeps"] = list(self.substeps)
        for name in (*_U8_FIELDS, "step_limit"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        data["quality"] = self.quality
        if self.niss is not None:
            data["niss"] = self.niss.value
        data["params"] = dict(self.params)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StepConfig:
        """Build a configuration from a mapping produced by :meth:`to_dict`."""
        for required in ("kind", "quality", "params"):
            if required not in data:
                raise ValueError(f"missing field {required!r}")
        params = data["params"]
        if not isinstance(params, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in params.items()
        ):
            raise ValueError("params must map strings to strings")
        substeps = data.get("substeps")
        if substeps is not None:
            if not isinstance(substeps, list) or not all(isinstance(s, str) for s in substeps):
                raise ValueError("substeps must be a list of strings")
            substeps = list(substeps)
        niss = data.get("niss")
        return cls(
            kind=_enum_value(StepKind, data["kind"]),
            substeps=substeps,
            min=data.get("min"),
            max=data.get("max"),
            absolute_min=data.get("absolute_min"),
            absolute_max=data.get("absolute_max"),
            step_limit=data.get("step_limit"),
            quality=data["quality"],
            niss=None if niss is None else _enum_value(NissSwitchType, niss),
            params=dict(params),
        )


@dataclass(frozen=True)
class DefaultStepOptions:
    """Search bounds used when running a step."""

    niss_type: NissSwitchType
    min_moves: int
    max_moves: int
    absolute_min_moves: int | None = None
    absolute_max_moves: int | None = None
    step_limit: int | None = None


@dataclass
class SolverRequest:
    """A scramble together with the steps to solve it with."""

    scramble: str
    steps: list[StepConfig] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialise the request as JSON text."""
        return json.dumps(
            {"scramble": self.scramble, "steps": [step.to_dict() for step in self.steps]}
        )

    @classmethod
    def from_json(cls, text: str) -> SolverRequest:
        """Parse a request from JSON text."""
        data = json.loads(text)
        if not isinstance(data, dict) or "scramble" not in data or "steps" not in data:
            raise ValueError("solver request needs 'scramble' and 'steps'")
        if not isinstance(data["scramble"], str) or not isinstance(data["steps"], list):
            raise ValueError("malformed solver request")
        return cls(
            scramble=data["scramble"],
            steps=[StepConfig.from_dict(step) for step in data["steps"]],
        )