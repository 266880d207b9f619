import pytest

from fmcconfig.steps import CubeAxis, NissSwitchType
from fmcconfig.storage import Store, Toggle, build_toggle_chain


def test_missing_value_returns_default():
    store = Store()
    assert store.setting("eo-max-abs", 5).get() == 5


def test_set_then_get_round_trip():
    store = Store()
    setting = store.setting("dr-max-abs", 14)
    setting.set(9)
    assert setting.get() == 9
    assert store.setting("dr-max-abs", 14).get() == 9


def test_values_stored_as_json_under_namespaced_key():
    backing = {}
    store = Store(backing)
    store.setting("fin-ls", False).set(True)
    assert backing == {"mallard-fin-ls": "true"}


def test_legacy_key_is_migrated():
    backing = {"eo-max-abs": "3"}
    store = Store(backing)
    setting = store.setting("eo-max-abs", 5)
    assert setting.get() == 3
    assert "eo-max-abs" not in backing
    assert backing["mallard-eo-max-abs"] == "3"


def test_legacy_key_ignored_when_namespaced_exists():
    backing = {"eo-max-abs": "3", "mallard-eo-max-abs": "4"}
    store = Store(backing)
    assert store.setting("eo-max-abs", 5).get() == 4
    assert backing["eo-max-abs"] == "3"


def test_clear_restores_default_and_removes_entry():
    backing = {}
    store = Store(backing)
    setting = store.setting("eo-niss", NissSwitchType.ALWAYS)
    setting.set(NissSwitchType.NEVER)
    setting.clear()
    assert setting.get() is NissSwitchType.ALWAYS
    assert backing == {}


def test_enum_round_trip():
    backing = {}
    store = Store(backing)
    setting = store.setting("dr-niss", NissSwitchType.BEFORE)
    setting.set(NissSwitchType.ALWAYS)
    assert setting.get() is NissSwitchType.ALWAYS
    assert backing["mallard-dr-niss"] == '"Always"'


def test_enum_list_round_trip():
    store = Store()
    setting = store.setting("eo-variants", [CubeAxis.UD, CubeAxis.FB, CubeAxis.LR])
    setting.set([CubeAxis.LR])
    assert setting.get() == [CubeAxis.LR]


def test_string_list_with_empty_default():
    store = Store()
    setting = store.setting("htr-subsets", [])
    setting.set(["4a1 4e", "0c0 0e"])
    assert setting.get() == ["4a1 4e", "0c0 0e"]


@pytest.mark.parametrize("text", ["not json", '"Sometimes"', "true"])
def test_unreadable_value_falls_back_to_default(text):
    store = Store({"mallard-eo-niss": text})
    assert store.setting("eo-niss", NissSwitchType.ALWAYS).get() is NissSwitchType.ALWAYS


def test_default_list_is_not_shared():
    store = Store()
    setting = store.setting("dr-triggers", ["R"])
    value = setting.get()
    value.append("R U R")
    assert setting.get() == ["R"]


def test_items_only_namespaced():
    store = Store({"other": "1", "mallard-a": "2"})
    assert store.items() == {"mallard-a": "2"}


def test_replace_drops_previous_entries():
    backing = {"mallard-a": "1", "other": "x"}
    store = Store(backing)
    store.replace({"mallard-b": "2"})
    assert backing == {"mallard-b": "2"}


def test_toggle_delegates():
    state = {"on": False}
    toggle = Toggle(lambda: state["on"], lambda s: state.update(on=s))
    toggle.set(True)
    assert toggle.get() is True


def test_toggle_chain_defaults_enabled():
    chain = build_toggle_chain(Store(), "enabled", 3)
    assert [t.get() for t in chain] == [True, True, True]


def test_toggle_chain_disable_cascades_forward():
    chain = build_toggle_chain(Store(), "enabled", 3)
    chain[1].set(False)
    assert [t.get() for t in chain] == [True, False, False]


def test_toggle_chain_enable_cascades_backward():
    chain = build_toggle_chain(Store(), "enabled", 3)
    chain[0].set(False)
    chain[2].set(True)
    assert [t.get() for t in chain] == [True, True, True]


def test_toggle_chain_uses_numbered_keys():
    backing = {}
    chain = build_toggle_chain(Store(backing), "enabled", 2)
    chain[0].set(False)
    assert set(backing) == {"mallard-enabled-0", "mallard-enabled-1"}