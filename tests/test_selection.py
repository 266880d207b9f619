import pytest

from fmcconfig.selection import (
    DEFAULT_TRIGGER_OPTIONS,
    add_subset,
    display_subsets,
    remove_subset,
    trigger_options,
)
from fmcconfig.subsets import DR_SUBSETS


def test_add_short_name_adds_all_matching():
    result = add_subset([], "4a1")
    assert "4a1 4e" in result
    assert all(name.startswith("4a1") for name in result)
    assert len(result) == sum(1 for s in DR_SUBSETS if s.name().startswith("4a1"))


def test_add_full_name_adds_one():
    assert add_subset(["2c3 2e"], "4a1 4e") == ["2c3 2e", "4a1 4e"]


def test_add_is_idempotent_and_does_not_mutate():
    start = ["4a1 4e"]
    once = add_subset(start, "4a1")
    twice = add_subset(once, "4a1")
    assert once == twice
    assert start == ["4a1 4e"]
    assert once.count("4a1 4e") == 1


def test_add_then_remove_roundtrip():
    added = add_subset(["2c3 2e"], "4a1")
    assert remove_subset(added, "4a1") == ["2c3 2e"]


def test_remove_by_prefix_keeps_others():
    assert remove_subset(["4a1 0e", "4a1 2e", "4b2 2e"], "4a1") == ["4b2 2e"]


def test_display_collapses_without_advanced():
    assert display_subsets(["4a1 0e", "4a1 2e", "4b2 2e"], False) == ["4a1", "4b2"]


def test_display_advanced_keeps_full_names():
    names = ["4a1 0e", "4a1 2e", "4a1 0e"]
    assert display_subsets(names, True) == ["4a1 0e", "4a1 2e"]


def test_display_rejects_malformed_name():
    with pytest.raises(ValueError):
        display_subsets(["4a1"], False)


def test_trigger_options_default_sorted_unique():
    options = trigger_options([])
    assert options == sorted(options)
    assert set(options) == set(DEFAULT_TRIGGER_OPTIONS)
    assert options[0] == "R"


def test_trigger_options_dedup_and_extend():
    base = trigger_options([])
    assert trigger_options(["R U R"]) == base
    extended = trigger_options(["R D R", "R D R"])
    assert extended.count("R D R") == 1
    assert len(extended) == len(base) + 1