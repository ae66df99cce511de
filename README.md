# fishingsettings

Builds and maintains `fishingsettings.json`, the settings file for a survival game
fishing mod. The file holds:

- general and external-logging switches,
- predator spawn chances, warning sound and warning message settings,
- the predators that may spawn and the bugs the bug catcher can yield,
- per-species catch settings: environment, catch method, meat or bone yield and
  catch probability, for every species the catalog knows,
- lists of junk items and of liquid containers that are fished up empty.

The file is written with its descriptive `...Info` strings, so a freshly
generated file documents itself.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
fishingsettings [FOLDER] [--client] [--show]
```

Loads `fishingsettings.json` from `FOLDER` (the current directory by default):

- If the file is missing, a fresh one with the default settings is written,
  creating the folder when needed.
- If the file carries a config version other than the current one (`0.1`), its
  settings are first written to `fishingsettings_old.json` in the same folder,
  and then the file is replaced by a new default file.
- A file whose version matches is left as it is.

On success it prints the path of the settings file, or with `--show` the
resulting settings as JSON. `--client` behaves as a client does: nothing is read
or written and the settings stay empty. A malformed file, or a file that cannot
be read or written, prints an error to standard error and exits with status 1.

## Library use

```python
from fishingsettings.config import FishingConfig, load_config, save_config, get_config, reset_config
from fishingsettings.catalog import default_species, default_species_table, species_names
from fishingsettings.species import CatchMethod, Environment, SpeciesConf
from fishingsettings.sections import PredatorSettings, section_to_dict, section_from_dict

config = load_config("profile/gebsfish", is_server=True)

carp = default_species("Carp")
print(carp.environment, carp.catch_method, carp.catch_probability, carp.meat)
print(CatchMethod.ROD_AND_LARGE_TRAP.includes(CatchMethod.ROD))   # True
print(Environment.BOTH.includes(Environment.SEA))                 # True

print(species_names())

# a shared instance, loaded once per process
shared = get_config("profile/gebsfish", is_server=True)
reset_config()  # the next get_config loads again
```

### Modules

- `fishingsettings.config` — `FishingConfig` with `defaults()`, `to_dict()` and
  `from_dict()`; `load_config(folder, is_server)`, `save_config(config, folder)`,
  `get_config(folder, is_server)`, `reset_config()` and the command's `main()`.
  Also the constants `CONFIG_VERSION`, `SETTINGS_FILE`, `BACKUP_FILE` and
  `RPC_PLAY_PREDATOR_SOUND`.
- `fishingsettings.species` — `Environment` (pond, sea, both), `CatchMethod`
  (a bit set of rod, large trap and small trap) and `SpeciesConf`, with
  `to_dict()` and `from_dict()`. A species yields either meat or bones, or
  neither; `Environment` and `CatchMethod` are required when reading a species.
- `fishingsettings.catalog` — the default settings of every species, in
  settings-file order: `species_names()`, `default_species(name)` (raises
  `KeyError` for an unknown name) and `default_species_table()`.
- `fishingsettings.sections` — the fixed sections as dataclasses
  (`GeneralSettings`, `LoggingSettings`, `PredatorSettings`, `PredatorEntry`,
  `BugEntry`, `BugSettings`, `JunkSettings`, `ContainerJunkSettings`),
  `section_to_dict(section)`, `section_from_dict(cls, data)`, `default_bugs()`
  and `default_predators()`. Missing keys keep their defaults; values of the
  wrong type raise `ValueError`.

When reading a settings file, absent or null parts stay `None` and unknown keys
are ignored.

## What it does not do

This package only generates, reads and version-checks the settings file. It does
not simulate fishing, spawn predators or play sounds; the values it manages are
meant to be read by the game mod itself.