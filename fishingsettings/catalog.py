"""Default catch settings of every species the mod knows about.

The order of the catalog is the order in which the species appear in the
settings file.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

from .species import CatchMethod, Environment, SpeciesConf

__all__ = ["default_species", "default_species_table", "species_names"]

_POND = Environment.POND
_SEA = Environment.SEA

_ROD = CatchMethod.ROD
_ROD_LARGE = CatchMethod.ROD_AND_LARGE_TRAP
_SMALL = CatchMethod.SMALL_TRAP
_ROD_SMALL = CatchMethod.ROD_AND_SMALL_TRAP

_MEAT = (1.0, 2.0)
_BONE = (1.0, 1.0)


class _Defaults(NamedTuple):
    environment: Environment
    catch_method: CatchMethod
    catch_probability: int = 15
    meat: Optional[Tuple[float, float]] = _MEAT
    bone: Optional[Tuple[float, float]] = None


_CATALOG: Mapping[str, _Defaults] = MappingProxyType(
    {
        "Mackerel": _Defaults(_SEA, _ROD_LARGE),
        "Carp": _Defaults(_POND, _ROD_LARGE),
        "Sardines": _Defaults(_SEA, _SMALL, meat=None),
        "Bitterlings": _Defaults(_POND, _SMALL, meat=None),
        "WalleyePollock": _Defaults(_SEA, _ROD_LARGE, 24),
        "SteelheadTrout": _Defaults(_SEA, _ROD_LARGE, 12),
        "Shrimp": _Defaults(_SEA, _SMALL, 1, meat=None),
        "NorthernPike": _Defaults(_POND, _ROD),
        "LargemouthBass": _Defaults(_POND, _ROD_LARGE),
        "SmallmouthBass": _Defaults(_POND, _ROD_LARGE),
        "Walleye": _Defaults(_POND, _ROD_LARGE),
        "Sunfish": _Defaults(_POND, _ROD_LARGE),
        "WhiteBass": _Defaults(_POND, _ROD_LARGE),
        "BlackBass": _Defaults(_POND, _ROD_LARGE),
        "RainbowTrout": _Defaults(_POND, _ROD_LARGE),
        "BrownTrout": _Defaults(_POND, _ROD_LARGE),
        "BrookTrout": _Defaults(_POND, _ROD_LARGE),
        "LakeTrout": _Defaults(_POND, _ROD_LARGE),
        "CutthroatTrout": _Defaults(_POND, _ROD_LARGE),
        "Perch": _Defaults(_POND, _ROD_LARGE),
        "Catfish": _Defaults(_POND, _ROD_LARGE),
        "Minnow": _Defaults(_POND, _ROD_SMALL),
        "Bluegill": _Defaults(_POND, _ROD_LARGE),
        "Sauger": _Defaults(_POND, _ROD_LARGE),
        "Bowfin": _Defaults(_POND, _ROD_LARGE),
        "SlimySculpin": _Defaults(_POND, _ROD_LARGE),
        "Severum": _Defaults(_POND, _ROD_LARGE),
        "Crayfish": _Defaults(_POND, _SMALL),
        "Mahimahi": _Defaults(_SEA, _ROD),
        "Sailfish": _Defaults(_SEA, _ROD),
        "Angelfish": _Defaults(_SEA, _ROD),
        "AsianSeaBass": _Defaults(_SEA, _ROD_LARGE),
        "BlueMarlin": _Defaults(_SEA, _ROD),
        "Bonita": _Defaults(_SEA, _ROD_LARGE),
        "CherrySalmon": _Defaults(_SEA, _ROD_LARGE),
        "ChinookSalmon": _Defaults(_SEA, _ROD_LARGE),
        "SockeyeSalmon": _Defaults(_SEA, _ROD_LARGE),
        "FlatheadMullet": _Defaults(_SEA, _ROD_LARGE),
        "LeopardShark": _Defaults(_SEA, _ROD),
        "PacificCod": _Defaults(_SEA, _ROD_LARGE),
        "RedheadCichlid": _Defaults(_SEA, _ROD_LARGE),
        "RoughneckRock": _Defaults(_SEA, _ROD_LARGE),
        "BlueTang": _Defaults(_SEA, _ROD_LARGE),
        "HairtailFish": _Defaults(_SEA, _ROD_LARGE),
        "HumpheadWrasse": _Defaults(_SEA, _ROD_LARGE),
        "SiameseTigerfish": _Defaults(_SEA, _ROD_LARGE),
        "GreatWhiteShark": _Defaults(_SEA, _ROD),
        "AngelShark": _Defaults(_SEA, _ROD),
        "YellowfinTuna": _Defaults(_SEA, _ROD),
        "BloodClam": _Defaults(_SEA, _SMALL),
        "Mussel": _Defaults(_SEA, _SMALL),
        "BlackDevilSnail": _Defaults(_SEA, _SMALL, meat=None, bone=_BONE),
        "Starfish": _Defaults(_SEA, _SMALL, meat=None, bone=_BONE),
        "KingCrab": _Defaults(_SEA, _SMALL),
        "Jellyfish": _Defaults(_SEA, _SMALL),
        "Lobster": _Defaults(_SEA, _SMALL),
        "BlueLobster": _Defaults(_SEA, _SMALL),
    }
)


def species_names() -> tuple[str, ...]:
    """Names of all known species, in settings-file order."""
    return tuple(_CATALOG)


def default_species(name: str) -> SpeciesConf:
    """Return a fresh copy of the default settings of species ``name``.

    Raises KeyError for a species the catalog does not know.
    """
    try:
        defaults = _CATALOG[name]
    except KeyError:
        raise KeyError(f"unknown species: {name!r}") from None
    return SpeciesConf(**defaults._asdict())


def default_species_table() -> dict[str, SpeciesConf]:
    """Return fresh default settings for every species, in settings-file order."""
    return {name: default_species(name) for name in _CATALOG}