import pytest

from fishingsettings.catalog import (
    default_species,
    default_species_table,
    species_names,
)
from fishingsettings.species import CatchMethod, Environment, SpeciesConf


def test_names_start_and_end_in_file_order():
    names = species_names()
    assert names[0] == "Mackerel"
    assert names[1] == "Carp"
    assert names[-1] == "BlueLobster"


def test_names_are_unique():
    names = species_names()
    assert len(set(names)) == len(names)


def test_table_matches_names_in_order():
    table = default_species_table()
    assert list(table) == list(species_names())
    for name, conf in table.items():
        assert conf == default_species(name)


def test_mackerel_defaults():
    conf = default_species("Mackerel")
    assert conf.environment is Environment.SEA
    assert conf.catch_method is CatchMethod.ROD_AND_LARGE_TRAP
    assert conf.catch_probability == 15
    assert conf.meat == (1.0, 2.0)
    assert conf.bone is None


def test_mackerel_json_object():
    data = default_species("Mackerel").to_dict()
    assert data["Environment"] == 2
    assert data["CatchMethod"] == 3
    assert data["MeatMin"] == 1
    assert data["MeatMax"] == 2
    assert data["CatchProbability"] == 15
    assert data["EnvironmentInfo"] == "1 - pond, 2 - sea, 3 - both"


def test_walleye_pollock_and_steelhead_probabilities():
    assert default_species("WalleyePollock").catch_probability == 24
    assert default_species("SteelheadTrout").catch_probability == 12


def test_shrimp_has_no_yield_and_low_probability():
    conf = default_species("Shrimp")
    assert conf.catch_probability == 1
    assert conf.catch_method is CatchMethod.SMALL_TRAP
    assert conf.meat is None
    assert conf.bone is None


@pytest.mark.parametrize("name", ["Sardines", "Bitterlings"])
def test_small_fish_without_meat(name):
    conf = default_species(name)
    assert conf.meat is None
    assert conf.bone is None
    assert "MeatMin" not in conf.to_dict()


@pytest.mark.parametrize("name", ["BlackDevilSnail", "Starfish"])
def test_bone_species(name):
    conf = default_species(name)
    assert conf.bone == (1.0, 1.0)
    assert conf.meat is None
    data = conf.to_dict()
    assert data["BoneMin"] == 1
    assert data["BoneMax"] == 1
    assert "MeatMin" not in data


def test_minnow_is_rod_and_small_trap():
    assert default_species("Minnow").catch_method is CatchMethod.ROD_AND_SMALL_TRAP


def test_pond_species_include_carp_and_crayfish():
    assert default_species("Carp").environment is Environment.POND
    crayfish = default_species("Crayfish")
    assert crayfish.environment is Environment.POND
    assert crayfish.catch_method is CatchMethod.SMALL_TRAP
    assert crayfish.meat == (1.0, 2.0)


def test_rod_only_sea_species():
    for name in ("Mahimahi", "BlueMarlin", "GreatWhiteShark", "YellowfinTuna"):
        conf = default_species(name)
        assert conf.environment is Environment.SEA
        assert conf.catch_method is CatchMethod.ROD


def test_unknown_species_raises():
    with pytest.raises(KeyError):
        default_species("Goldfish")


def test_copies_are_independent():
    first = default_species("Carp")
    first.catch_probability = 0
    first.meat = (3.0, 4.0)
    again = default_species("Carp")
    assert again.catch_probability == 15
    assert again.meat == (1.0, 2.0)


def test_tables_are_independent():
    table = default_species_table()
    table["Mackerel"].catch_probability = 0
    del table["Carp"]
    fresh = default_species_table()
    assert fresh["Mackerel"].catch_probability == 15
    assert "Carp" in fresh


def test_all_defaults_round_trip_through_json_object():
    for name, conf in default_species_table().items():
        assert SpeciesConf.from_dict(conf.to_dict()) == conf, name


def test_invariants_over_catalog():
    for conf in default_species_table().values():
        assert 0 <= conf.catch_probability <= 25
        assert conf.meat is None or conf.bone is None
        assert conf.environment in (Environment.POND, Environment.SEA)
        for yield_range in (conf.meat, conf.bone):
            if yield_range is not None:
                low, high = yield_range
                assert low <= high