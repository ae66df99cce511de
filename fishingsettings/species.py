"""Per-species catch settings: where a species lives, how it is caught and
what it yields when prepared."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Tuple

__all__ = [
    "Environment",
    "CatchMethod",
    "SpeciesConf",
    "ENVIRONMENT_INFO",
    "CATCH_METHOD_INFO",
    "MEAT_INFO",
    "BONE_INFO",
    "CATCH_PROB_INFO",
]

ENVIRONMENT_INFO = "1 - pond, 2 - sea, 3 - both"
CATCH_METHOD_INFO = (
    "1 - rod, 2 - largetrap, 3 - rod and largetrap, 4 - smalltrap, "
    "5 - rod and smalltrap, 6 - largetrap and smalltrap, "
    "7 - rod, largetrap and smalltrap"
)
MEAT_INFO = (
    "MeatMin and MeatMax determine the minimum and maximum meat pieces for the "
    "fillet action. DayZ has a hard limit of 10 fillets max."
)
BONE_INFO = (
    "BoneMin and BoneMax determine the minimum and maximum Bone pieces for the "
    "prepare action. DayZ has a hard limit of 10 bones max."
)
CATCH_PROB_INFO = "0-25; 0 means no chance to catch fish, 25 means high chance"

Range = Tuple[float, float]


class Environment(IntEnum):
    """Water a species can be caught in."""

    POND = 1
    SEA = 2
    BOTH = 3

    def includes(self, other: "Environment") -> bool:
        """True if this environment covers ``other``."""
        other = Environment(other)
        return (self & other) == other


class CatchMethod(IntEnum):
    """Ways of catching a species; a bit set of rod, large trap and small trap."""

    ROD = 1
    LARGE_TRAP = 2
    ROD_AND_LARGE_TRAP = 3
    SMALL_TRAP = 4
    ROD_AND_SMALL_TRAP = 5
    LARGE_AND_SMALL_TRAP = 6
    ALL = 7

    def includes(self, method: "CatchMethod") -> bool:
        """True if every way in ``method`` is allowed by this setting."""
        method = CatchMethod(method)
        return (self & method) == method


def _int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"invalid value for {key!r}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"invalid value for {key!r}: {value!r}")


def _float(key: str, value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ValueError(f"invalid value for {key!r}: {value!r}")


def _range(data: Mapping[str, Any], low_key: str, high_key: str) -> Optional[Range]:
    present = [key for key in (low_key, high_key) if key in data]
    if not present:
        return None
    if len(present) == 1:
        missing = high_key if present[0] == low_key else low_key
        raise ValueError(f"{present[0]!r} given without {missing!r}")
    return (_float(low_key, data[low_key]), _float(high_key, data[high_key]))


@dataclass
class SpeciesConf:
    """Catch settings of one species.

    ``meat`` is the (min, max) count of fillets; ``bone`` the (min, max) count of
    bones for species that are prepared for bones instead. A species has at
    most one of the two, and some have neither.
    """

    environment: Environment
    catch_method: CatchMethod
    catch_probability: int = 15
    meat: Optional[Range] = None
    bone: Optional[Range] = None

    def __post_init__(self) -> None:
        self.environment = Environment(_int("Environment", self.environment))
        self.catch_method = CatchMethod(_int("CatchMethod", self.catch_method))
        self.catch_probability = _int("CatchProbability", self.catch_probability)
        if self.meat is not None and self.bone is not None:
            raise ValueError("a species yields either meat or bones, not both")
        if self.meat is not None:
            low, high = self.meat
            self.meat = (_float("MeatMin", low), _float("MeatMax", high))
        if self.bone is not None:
            low, high = self.bone
            self.bone = (_float("BoneMin", low), _float("BoneMax", high))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this species, in file order."""
        data: dict[str, Any] = {
            "EnvironmentInfo": ENVIRONMENT_INFO,
            "Environment": int(self.environment),
            "CatchMethodInfo": CATCH_METHOD_INFO,
            "CatchMethod": int(self.catch_method),
        }
        if self.meat is not None:
            data["MeatInfo"] = MEAT_INFO
            data["MeatMin"], data["MeatMax"] = self.meat
        if self.bone is not None:
            data["BoneInfo"] = BONE_INFO
            data["BoneMin"], data["BoneMax"] = self.bone
        data["CatchProbInfo"] = CATCH_PROB_INFO
        data["CatchProbability"] = self.catch_probability
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpeciesConf":
        """Build species settings from a JSON object.

        ``Environment`` and ``CatchMethod`` are required; a missing
        ``CatchProbability`` keeps its default. Info strings are ignored.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a JSON object for a species, got {data!r}")
        missing = [key for key in ("Environment", "CatchMethod") if key not in data]
        if missing:
            raise ValueError(f"missing species settings: {missing}")
        kwargs: dict[str, Any] = {
            "environment": Environment(_int("Environment", data["Environment"])),
            "catch_method": CatchMethod(_int("CatchMethod", data["CatchMethod"])),
            "meat": _range(data, "MeatMin", "MeatMax"),
            "bone": _range(data, "BoneMin", "BoneMax"),
        }
        if "CatchProbability" in data:
            kwargs["catch_probability"] = _int(
                "CatchProbability", data["CatchProbability"]
            )
        return cls(**kwargs)