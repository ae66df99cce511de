"""The fishing settings file: its layout, generation and loading.

A server keeps its settings in ``fishingsettings.json`` inside a settings
folder. When the file is missing it is generated with default values; when
it was written by another settings version it is first backed up as
``fishingsettings_old.json`` and then regenerated. Clients do not read the
file and work with an empty configuration.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from .catalog import default_species_table, species_names
from .sections import (
    BugEntry,
    ContainerJunkSettings,
    GeneralSettings,
    JunkSettings,
    LoggingSettings,
    PredatorEntry,
    PredatorSettings,
    default_bugs,
    default_predators,
    section_from_dict,
    section_to_dict,
)
from .species import SpeciesConf

__all__ = [
    "CONFIG_VERSION",
    "RPC_PLAY_PREDATOR_SOUND",
    "SETTINGS_FILE",
    "BACKUP_FILE",
    "FishingConfig",
    "load_config",
    "save_config",
    "get_config",
    "reset_config",
    "main",
]

CONFIG_VERSION = "0.1"
RPC_PLAY_PREDATOR_SOUND = 2757509117
SETTINGS_FILE = "fishingsettings.json"
BACKUP_FILE = "fishingsettings_old.json"

_log = logging.getLogger(__name__)

PathLike = Union[str, Path]

# (attribute, JSON key, section class) for the leading and trailing sections.
_HEAD_SECTIONS = (
    ("general_settings", "GeneralSettings", GeneralSettings),
    ("predator_settings", "PredatorSettings", PredatorSettings),
    ("cf_tools_logging", "CFToolsLogging", LoggingSettings),
)
_TAIL_SECTIONS = (
    ("junk", "Junk", JunkSettings),
    ("container_junk", "ContainerJunk", ContainerJunkSettings),
)


def _empty_species() -> dict[str, Optional[SpeciesConf]]:
    return {name: None for name in species_names()}


def _entries_to_list(entries: Optional[list[Any]]) -> Optional[list[dict[str, Any]]]:
    if entries is None:
        return None
    return [section_to_dict(entry) for entry in entries]


def _entries_from_list(cls: type, key: str, value: Any) -> Optional[list[Any]]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"invalid value for {key!r}: expected a list, got {value!r}")
    return [section_from_dict(cls, item) for item in value]


@dataclass
class FishingConfig:
    """Complete fishing settings.

    Every part is ``None`` until it is loaded or generated, as on a client.
    ``species`` maps each known species name to its settings.
    """

    config_version: str = ""
    general_settings: Optional[GeneralSettings] = None
    predator_settings: Optional[PredatorSettings] = None
    cf_tools_logging: Optional[LoggingSettings] = None
    predators: Optional[list[PredatorEntry]] = None
    bugs: Optional[list[BugEntry]] = None
    species: dict[str, Optional[SpeciesConf]] = field(default_factory=_empty_species)
    junk: Optional[JunkSettings] = None
    container_junk: Optional[ContainerJunkSettings] = None

    @classmethod
    def defaults(cls) -> "FishingConfig":
        """Return the settings written into a newly generated file."""
        return cls(
            config_version=CONFIG_VERSION,
            general_settings=GeneralSettings(),
            predator_settings=PredatorSettings(),
            cf_tools_logging=LoggingSettings(),
            predators=default_predators(),
            bugs=default_bugs(),
            species=dict(default_species_table()),
            junk=JunkSettings(),
            container_junk=ContainerJunkSettings(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object of the settings file, in file order."""
        data: dict[str, Any] = {"ConfigVersion": self.config_version}
        for attr, key, _ in _HEAD_SECTIONS:
            section = getattr(self, attr)
            data[key] = None if section is None else section_to_dict(section)
        data["Predators"] = _entries_to_list(self.predators)
        data["Bugs"] = _entries_to_list(self.bugs)
        for name in species_names():
            conf = self.species.get(name)
            data[name] = None if conf is None else conf.to_dict()
        for attr, key, _ in _TAIL_SECTIONS:
            section = getattr(self, attr)
            data[key] = None if section is None else section_to_dict(section)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FishingConfig":
        """Build settings from a JSON object.

        Absent or null parts stay ``None``; unknown keys are ignored.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a JSON object for the settings, got {data!r}")
        version = data.get("ConfigVersion", "")
        if not isinstance(version, str):
            raise ValueError(f"invalid value for 'ConfigVersion': {version!r}")
        config = cls(config_version=version)
        for attr, key, section_cls in (*_HEAD_SECTIONS, *_TAIL_SECTIONS):
            value = data.get(key)
            if value is not None:
                setattr(config, attr, section_from_dict(section_cls, value))
        config.predators = _entries_from_list(
            PredatorEntry, "Predators", data.get("Predators")
        )
        config.bugs = _entries_from_list(BugEntry, "Bugs", data.get("Bugs"))
        for name in species_names():
            value = data.get(name)
            if value is not None:
                config.species[name] = SpeciesConf.from_dict(value)
        return config


def _write(config: FishingConfig, path: Path) -> None:
    path.write_text(json.dumps(config.to_dict(), indent=4) + "\n", encoding="utf-8")


def save_config(config: FishingConfig, folder: PathLike) -> Path:
    """Write ``config`` to the settings file in ``folder``, creating the folder."""
    folder = Path(folder)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / SETTINGS_FILE
    _write(config, path)
    _log.info("Settings file written to %s", path)
    return path


def load_config(folder: PathLike, is_server: bool) -> FishingConfig:
    """Load the settings in ``folder``, generating the file where needed.

    Off the server nothing is read and an empty configuration is returned.
    A malformed file raises ValueError or TypeError.
    """
    if not is_server:
        return FishingConfig()
    folder = Path(folder)
    path = folder / SETTINGS_FILE
    if path.exists():
        with path.open(encoding="utf-8") as handle:
            loaded = FishingConfig.from_dict(json.load(handle))
        _log.info("Found settings file %s; loading settings.", path)
        if loaded.config_version == CONFIG_VERSION:
            return loaded
        backup = folder / BACKUP_FILE
        _write(loaded, backup)
        _log.info(
            "Settings version %r differs from %r; old file backed up as %s.",
            loaded.config_version,
            CONFIG_VERSION,
            backup,
        )
    _log.info("Generating settings file.")
    config = FishingConfig.defaults()
    save_config(config, folder)
    return config


_cached: Optional[FishingConfig] = None


def get_config(folder: PathLike, is_server: bool) -> FishingConfig:
    """Return the shared settings, loading them on first use."""
    global _cached
    if _cached is None:
        _log.info("Loading fishing settings.")
        _cached = load_config(folder, is_server)
    return _cached


def reset_config() -> None:
    """Forget the shared settings so that the next get_config loads again."""
    global _cached
    _cached = None


def main(argv: Optional[list[str]] = None) -> int:
    """Load or generate the settings file in a folder."""
    parser = argparse.ArgumentParser(
        prog="fishingsettings",
        description="Load the fishing settings file, generating it if needed.",
    )
    parser.add_argument("folder", nargs="?", default=".", help="settings folder")
    parser.add_argument(
        "--client",
        action="store_true",
        help="behave as a client: read nothing and write nothing",
    )
    parser.add_argument(
        "--show", action="store_true", help="print the resulting settings as JSON"
    )
    args = parser.parse_args(argv)
    try:
        config = load_config(args.folder, not args.client)
    except (ValueError, TypeError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if args.show:
        print(json.dumps(config.to_dict(), indent=4))
    else:
        print(Path(args.folder) / SETTINGS_FILE)
    return 0