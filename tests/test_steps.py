import json

import pytest

from fmcconfig.steps import (
    CubeAxis,
    DefaultStepOptions,
    NissSwitchType,
    SolverRequest,
    StepConfig,
    StepKind,
)


def test_new_step_config_defaults():
    config = StepConfig(StepKind.RZP)
    assert config.quality == 100
    assert config.params == {}
    assert config.niss is None
    assert config.min is None and config.max is None


def test_to_dict_omits_unset_optionals():
    data = StepConfig(StepKind.EO).to_dict()
    assert data == {"kind": "EO", "quality": 100, "params": {}}


def test_to_dict_includes_set_fields():
    config = StepConfig(
        StepKind.DR,
        substeps=["ud", "fb"],
        absolute_max=14,
        niss=NissSwitchType.BEFORE,
        params={"triggers": "R,R U2 R"},
        quality=10000,
    )
    data = config.to_dict()
    assert data["niss"] == "Before"
    assert data["absolute_max"] == 14
    assert data["substeps"] == ["ud", "fb"]
    assert "min" not in data


def test_dict_round_trip():
    config = StepConfig(
        StepKind.FINLS,
        substeps=["ud"],
        min=0,
        max=10,
        absolute_min=1,
        absolute_max=30,
        step_limit=5,
        quality=10000,
        niss=NissSwitchType.NEVER,
        params={"subsets": "4a1 4e"},
    )
    assert StepConfig.from_dict(config.to_dict()) == config


def test_from_dict_rejects_unknown_kind():
    with pytest.raises(ValueError):
        StepConfig.from_dict({"kind": "XYZ", "quality": 1, "params": {}})


def test_from_dict_requires_quality():
    with pytest.raises(ValueError):
        StepConfig.from_dict({"kind": "EO", "params": {}})


def test_from_dict_rejects_non_string_params():
    with pytest.raises(ValueError):
        StepConfig.from_dict({"kind": "EO", "quality": 1, "params": {"a": 1}})


def test_move_bounds_are_limited_to_a_byte():
    with pytest.raises(ValueError):
        StepConfig(StepKind.EO, max=256)
    with pytest.raises(ValueError):
        StepConfig(StepKind.EO, min=-1)


def test_solver_request_json_round_trip():
    request = SolverRequest(
        scramble="R' U' F",
        steps=[StepConfig(StepKind.EO, max=5), StepConfig(StepKind.DR, niss=NissSwitchType.ALWAYS)],
    )
    assert SolverRequest.from_json(request.to_json()) == request


def test_solver_request_json_shape():
    text = SolverRequest("R", [StepConfig(StepKind.HTR)]).to_json()
    data = json.loads(text)
    assert data["scramble"] == "R"
    assert data["steps"][0]["kind"] == "HTR"


def test_solver_request_rejects_missing_steps():
    with pytest.raises(ValueError):
        SolverRequest.from_json('{"scramble": "R"}')


def test_enum_lookups_by_value():
    assert NissSwitchType("Always") is NissSwitchType.ALWAYS
    assert StepKind("FRLS") is StepKind.FRLS
    assert [str(a) for a in CubeAxis] == ["UD", "FB", "LR"]


def test_default_step_options_keeps_values():
    opts = DefaultStepOptions(NissSwitchType.BEFORE, 2, 7, None, 12, None)
    assert (opts.min_moves, opts.max_moves, opts.absolute_max_moves) == (2, 7, 12)
    assert opts.absolute_min_moves is None