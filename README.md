# fmcconfig

Settings layer for a fewest-moves (FMC) Rubik's cube solver that works step
by step: EO, RZP, DR, HTR, FR and finish. The package keeps the options a
user picks for each step in a key-value store, turns them into the ordered
list of step configurations a solver consumes, and packs every stored
setting into a short string that can travel in a link.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `fmcconfig.subsets`: the 48 domino-reduction subsets as `Subset` records.
  `Subset.name()` gives names such as `"4a1 4e"`. `parse_subset` looks a
  subset up by its full name and raises `ValueError` for an unknown one.
  `expand_subset_name` returns `(subset, index)` pairs: a name of two or more
  characters matches every subset whose name starts with it, a single digit
  matches subsets by their corner quarter-turn count.
- `fmcconfig.steps`: the enums `StepKind`, `NissSwitchType` and `CubeAxis`;
  `StepConfig`, the settings of one step, with `to_dict` / `from_dict`
  (unset optional fields are left out); `DefaultStepOptions`; and
  `SolverRequest`, a scramble with its steps, with `to_json` / `from_json`.
  Out-of-range move bounds and malformed input raise `ValueError`.
- `fmcconfig.storage`: `Store` wraps any string mapping (a plain `dict` by
  default) and hands out `Setting` objects under keys prefixed with
  `mallard-`; a value found under the bare key is moved to the prefixed one.
  A `Setting` stores its value as JSON, and `get` falls back to the default
  when nothing valid is stored. `build_toggle_chain` links a series of
  `Toggle`s so that turning one on turns on all those before it and turning
  one off turns off all those after it.
- `fmcconfig.stepconfigs`: per-step settings `EOConfig`, `RZPConfig`,
  `DRConfig`, `HTRConfig`, `FRConfig` and `FinishConfig`, each built with
  `from_store` and put back to its defaults with `reset`. `SelectableAxis`
  converts to and from `CubeAxis`.
- `fmcconfig.selection`: `add_subset` (a three-character name such as `4a1`
  adds every subset starting with it), `remove_subset`, `display_subsets`
  (only the corner part of each name unless in advanced mode) and
  `trigger_options` (default DR triggers plus extra ones, sorted, without
  duplicates).
- `fmcconfig.preferences`: `SettingsState` holds the advanced mode, relative
  step lengths and user-defined DR triggers (`add_trigger`,
  `remove_trigger`). `is_valid_trigger` accepts move sequences without
  inverse moves that start with `R` and end with `R` or `L`.
- `fmcconfig.pipeline`: `get_step_configs` builds the step list for the
  enabled steps, putting an RZP step before DR when DR triggers are in use
  and choosing relative or absolute bounds by the preference;
  `variants_to_strings` names the chosen axes.
- `fmcconfig.share`: `encode_settings` / `decode_settings` turn the stored
  settings into compressed URL-safe base64 JSON and back; `share_query`
  builds a `?local=true&settings=...` query and `load_query` applies one to a
  store.

## Example

```python
from fmcconfig.pipeline import get_step_configs
from fmcconfig.preferences import SettingsState
from fmcconfig.share import load_query, share_query
from fmcconfig.stepconfigs import (
    DRConfig, EOConfig, FinishConfig, FRConfig, HTRConfig, RZPConfig,
)
from fmcconfig.storage import Store, Toggle, build_toggle_chain
from fmcconfig.subsets import expand_subset_name

for subset, index in expand_subset_name("4a1"):
    print(index, subset.name())

store = Store()
dr_on, htr_on, fin_on = build_toggle_chain(store, "enabled", 3)
always = Toggle(lambda: True, lambda state: None)
never = Toggle(lambda: False, lambda state: None)

steps = get_step_configs(
    EOConfig.from_store(store, always),
    RZPConfig.from_store(store),
    DRConfig.from_store(store, dr_on),
    HTRConfig.from_store(store, htr_on),
    FRConfig.from_store(store, never),
    FinishConfig.from_store(store, fin_on),
    SettingsState.from_store(store),
)
print([step.kind.value for step in steps])  # ['EO', 'RZP', 'DR', 'HTR', 'FIN']

query = share_query(store)
other = Store()
print(load_query(query, other))  # True
```

## What this package does not do

It does not solve cubes: there is no cube model, move search or pruning
table here, and nothing sends a `SolverRequest` anywhere. It has no user
interface and no command-line command. Storage is whatever mapping is given
to `Store`; the package itself writes nothing to disk.