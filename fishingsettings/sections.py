"""Fixed settings sections of the fishing configuration file.

Each section is a dataclass whose fields carry the JSON key they are stored
under. The descriptive ``...Info`` strings are part of the file and are kept
so that a freshly generated file documents itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from typing import Any

__all__ = [
    "GeneralSettings",
    "LoggingSettings",
    "PredatorSettings",
    "PredatorEntry",
    "BugEntry",
    "BugSettings",
    "JunkSettings",
    "ContainerJunkSettings",
    "section_to_dict",
    "section_from_dict",
    "default_bugs",
    "default_predators",
]


def _setting(key: str, default: Any) -> Any:
    """Declare a field stored under ``key`` with the type of ``default``."""
    if isinstance(default, list):
        items = tuple(default)
        return field(
            default_factory=lambda: list(items),
            metadata={"key": key, "kind": list},
        )
    return field(default=default, metadata={"key": key, "kind": type(default)})


def _coerce(kind: type, key: str, value: Any) -> Any:
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
    elif kind is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    elif kind is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif kind is str:
        if isinstance(value, str):
            return value
    elif kind is list:
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
    raise ValueError(f"invalid value for {key!r}: {value!r}")


def _export(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, list):
        return list(value)
    return value


@dataclass
class GeneralSettings:
    """General behaviour of the mod."""

    debug_info: str = _setting(
        "DebugInfo",
        "Turns debug mode on to print extra logs to the script.log file",
    )
    debug_logs: bool = _setting("DebugLogs", False)
    fish_quality_info: str = _setting(
        "FishQualityInfo", "Sets the base value for the fish quanity bar"
    )
    fish_quality: float = _setting("FishQuality", 1.0)


@dataclass
class LoggingSettings:
    """External logging switches."""

    logging_info: str = _setting(
        "LoggingInfo", "Requires the ExtraLogs mod by TRG to use this section."
    )
    catch_logs: bool = _setting("CatchLogs", False)
    predator_spawn: bool = _setting("PredatorSpawn", False)
    predator_sounds: bool = _setting("PredatorSounds", False)


@dataclass
class PredatorSettings:
    """Chances and warnings for predators drawn by fishing."""

    predator_spawn_enabled_info: str = _setting(
        "PredatorSpawnEnabledInfo",
        "Turns on(1) and off(0) the predators feature of the mod. When on, it will "
        "enable the random spawning of predators when catching/cutting up the fish.",
    )
    predator_spawn_enabled: bool = _setting("PredatorSpawnEnabled", True)
    predator_spawn_chance_info: str = _setting(
        "PredatorSpawnChanceInfo",
        "Controls the chance for a predator to spawn when a fish is caught or cut up. "
        "Fishing is when fishing, preparing is when getting fillets, failcatch is when "
        "nothing is caught.",
    )
    predator_spawn_chance_fishing: float = _setting("PredatorSpawnChanceFishing", 0.25)
    predator_spawn_chance_preparing: float = _setting(
        "PredatorSpawnChancePreparing", 0.25
    )
    predator_spawn_chance_fail_catch: float = _setting(
        "PredatorSpawnChanceFailCatch", 0.01
    )
    predator_spawn_sound_info: str = _setting(
        "PredatorSpawnSoundInfo",
        "PredatorWarningSoundEnable controls the audible notification and "
        "PredatorWarningSoundRadius controls how far players hear the sound from the "
        "triggering player.",
    )
    predator_warning_sound_enable: bool = _setting("PredatorWarningSoundEnable", True)
    predator_warning_sound_radius: int = _setting("PredatorWarningSoundRadius", 50)
    predator_warning_message_info: str = _setting(
        "PredatorWarningMessageInfo",
        "PredatorWarningMessageEnable turns the chat message on and off, "
        "PredatorWarningMessage'Color' controls the color of the text. Only set one "
        "of the colors to on at a time.",
    )
    predator_warning_message_enable: bool = _setting(
        "PredatorWarningMessageEnable", True
    )
    predator_warning_message_green: bool = _setting(
        "PredatorWarningMessageGreen", False
    )
    predator_warning_message_red: bool = _setting("PredatorWarningMessageRed", False)
    predator_warning_message_yellow: bool = _setting(
        "PredatorWarningMessageYellow", True
    )
    predator_warning_message_grey: bool = _setting("PredatorWarningMessageGrey", False)


@dataclass
class PredatorEntry:
    """One kind of predator that may be spawned near the player."""

    classname: str = _setting("Classname", "")
    spawn_chance: float = _setting("SpawnChance", 0.0)
    min_count: int = _setting("MinCount", 0)
    max_count: int = _setting("MaxCount", 0)
    min_radius: float = _setting("MinRadius", 0.0)
    max_radius: float = _setting("MaxRadius", 0.0)


@dataclass
class BugEntry:
    """One kind of bug that the bug catcher can yield."""

    classname: str = _setting("Classname", "")
    catch_chance: float = _setting("CatchChance", 0.0)


@dataclass
class BugSettings:
    """Per-bug catch weights of the older bug section."""

    not_implemented: str = _setting(
        "NotImplemented",
        "This section is not implemented yet. Please use the old bugs.cfg file to "
        "configure the bugs.",
    )
    bug_info: str = _setting(
        "BugInfo",
        "Controls catch chance for each bug when using the bug catcher. 0-25.",
    )
    worm: int = _setting("Worm", 10)
    grass_hopper: int = _setting("GrassHopper", 10)
    grub_worm: int = _setting("GrubWorm", 10)
    field_cricket: int = _setting("FieldCricket", 10)


@dataclass
class JunkSettings:
    """Items that may be fished up as junk."""

    junk_info: str = _setting(
        "JunkInfo", "Any item can be added here except for liquid containers."
    )
    classnames: list[str] = _setting(
        "Classnames", ["Wellies_Brown", "Wellies_Grey", "Wellies_Green", "Wellies_Black"]
    )


@dataclass
class ContainerJunkSettings:
    """Liquid containers that are fished up empty."""

    junk_info: str = _setting(
        "JunkInfo", "Add liquid containers here so they are empty when caught."
    )
    classnames: list[str] = _setting("Classnames", ["Pot"])


def _check_section_class(cls: Any) -> None:
    if not (isinstance(cls, type) and is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a settings section class")


def section_to_dict(section: Any) -> dict[str, Any]:
    """Return the JSON object for a section, keys in declaration order."""
    if not is_dataclass(section) or isinstance(section, type):
        raise TypeError(f"{section!r} is not a settings section")
    return {
        f.metadata["key"]: _export(getattr(section, f.name))
        for f in fields(section)
        if "key" in f.metadata
    }


def section_from_dict(cls: type, data: Mapping[str, Any]) -> Any:
    """Build a section from a JSON object; missing keys keep their defaults."""
    _check_section_class(cls)
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object for {cls.__name__}, got {data!r}")
    values: dict[str, Any] = {}
    for f in fields(cls):
        key = f.metadata.get("key")
        if key is None or key not in data:
            continue
        values[f.name] = _coerce(f.metadata["kind"], key, data[key])
    missing_required = [
        f.name
        for f in fields(cls)
        if f.name not in values and f.default is MISSING and f.default_factory is MISSING
    ]
    if missing_required:
        raise ValueError(f"missing settings for {cls.__name__}: {missing_required}")
    return cls(**values)


def default_bugs() -> list[BugEntry]:
    """Bugs written into a newly generated settings file."""
    return [
        BugEntry("geb_FieldCricket", 0.25),
        BugEntry("geb_GrassHopper", 0.25),
        BugEntry("geb_GrubWorm", 0.75),
        BugEntry("Worm", 0.25),
    ]


def default_predators() -> list[PredatorEntry]:
    """Predators written into a newly generated settings file."""
    return [
        PredatorEntry("Animal_CanisLupus_Grey", 0.6, 1, 3, 50.0, 200.0),
        PredatorEntry("Animal_UrsusArctos", 0.3, 1, 1, 100.0, 300.0),
    ]