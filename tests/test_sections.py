import json

import pytest

from fishingsettings.sections import (
    BugEntry,
    BugSettings,
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

ALL_SECTIONS = [
    GeneralSettings,
    LoggingSettings,
    PredatorSettings,
    PredatorEntry,
    BugEntry,
    BugSettings,
    JunkSettings,
    ContainerJunkSettings,
]


def test_general_settings_keys_and_defaults():
    data = section_to_dict(GeneralSettings())
    assert list(data) == ["DebugInfo", "DebugLogs", "FishQualityInfo", "FishQuality"]
    assert data["DebugLogs"] == 0
    assert data["FishQuality"] == 1


def test_predator_settings_defaults():
    data = section_to_dict(PredatorSettings())
    assert data["PredatorSpawnEnabled"] == 1
    assert data["PredatorSpawnChanceFishing"] == 0.25
    assert data["PredatorSpawnChancePreparing"] == 0.25
    assert data["PredatorSpawnChanceFailCatch"] == 0.01
    assert data["PredatorWarningSoundRadius"] == 50
    assert data["PredatorWarningMessageYellow"] == 1
    assert data["PredatorWarningMessageRed"] == 0


def test_logging_settings_all_off():
    data = section_to_dict(LoggingSettings())
    assert data["CatchLogs"] == 0
    assert data["PredatorSpawn"] == 0
    assert data["PredatorSounds"] == 0


def test_bug_settings_defaults():
    data = section_to_dict(BugSettings())
    assert [data[k] for k in ("Worm", "GrassHopper", "GrubWorm", "FieldCricket")] == [
        10,
        10,
        10,
        10,
    ]


def test_junk_defaults():
    assert JunkSettings().classnames == [
        "Wellies_Brown",
        "Wellies_Grey",
        "Wellies_Green",
        "Wellies_Black",
    ]
    assert ContainerJunkSettings().classnames == ["Pot"]


def test_junk_lists_are_independent():
    first = JunkSettings()
    first.classnames.append("Pot")
    assert "Pot" not in JunkSettings().classnames


def test_default_bugs():
    bugs = default_bugs()
    assert [b.classname for b in bugs] == [
        "geb_FieldCricket",
        "geb_GrassHopper",
        "geb_GrubWorm",
        "Worm",
    ]
    assert [b.catch_chance for b in bugs] == [0.25, 0.25, 0.75, 0.25]


def test_default_predators():
    wolf, bear = default_predators()
    assert section_to_dict(wolf) == {
        "Classname": "Animal_CanisLupus_Grey",
        "SpawnChance": 0.6,
        "MinCount": 1,
        "MaxCount": 3,
        "MinRadius": 50,
        "MaxRadius": 200,
    }
    assert bear.classname == "Animal_UrsusArctos"
    assert (bear.min_count, bear.max_count) == (1, 1)
    assert (bear.min_radius, bear.max_radius) == (100, 300)


@pytest.mark.parametrize("cls", ALL_SECTIONS)
def test_round_trip_through_json(cls):
    original = cls()
    text = json.dumps(section_to_dict(original))
    assert section_from_dict(cls, json.loads(text)) == original


def test_round_trip_of_modified_values():
    entry = PredatorEntry("Animal_Test", 0.5, 2, 4, 10.0, 20.0)
    assert section_from_dict(PredatorEntry, section_to_dict(entry)) == entry


def test_missing_keys_keep_defaults():
    settings = section_from_dict(PredatorSettings, {"PredatorWarningSoundRadius": 75})
    assert settings.predator_warning_sound_radius == 75
    assert settings.predator_spawn_chance_fishing == 0.25
    assert settings.predator_warning_message_yellow is True


def test_unknown_keys_ignored():
    settings = section_from_dict(GeneralSettings, {"Nope": 3, "DebugLogs": 1})
    assert settings.debug_logs is True
    assert settings == GeneralSettings(debug_logs=True)


def test_bool_accepts_json_bool_and_int():
    assert section_from_dict(LoggingSettings, {"CatchLogs": True}).catch_logs is True
    assert section_from_dict(LoggingSettings, {"CatchLogs": 0}).catch_logs is False


def test_integral_float_becomes_int():
    entry = section_from_dict(PredatorEntry, {"MinCount": 2.0})
    assert entry.min_count == 2
    assert isinstance(entry.min_count, int)


def test_int_becomes_float():
    entry = section_from_dict(BugEntry, {"CatchChance": 1})
    assert entry.catch_chance == 1.0
    assert isinstance(entry.catch_chance, float)


@pytest.mark.parametrize(
    "cls, data",
    [
        (LoggingSettings, {"CatchLogs": 2}),
        (LoggingSettings, {"CatchLogs": "yes"}),
        (PredatorEntry, {"MinCount": 1.5}),
        (PredatorEntry, {"MinCount": True}),
        (BugEntry, {"CatchChance": "high"}),
        (BugEntry, {"Classname": 5}),
        (JunkSettings, {"Classnames": "Pot"}),
        (JunkSettings, {"Classnames": ["Pot", 3]}),
    ],
)
def test_invalid_values_raise(cls, data):
    with pytest.raises(ValueError):
        section_from_dict(cls, data)


def test_non_mapping_data_raises():
    with pytest.raises(TypeError):
        section_from_dict(GeneralSettings, ["DebugLogs"])


def test_non_section_class_raises():
    with pytest.raises(TypeError):
        section_from_dict(dict, {})


def test_to_dict_rejects_non_section():
    with pytest.raises(TypeError):
        section_to_dict({"DebugLogs": 0})
    with pytest.raises(TypeError):
        section_to_dict(GeneralSettings)


def test_to_dict_copies_lists():
    junk = JunkSettings()
    data = section_to_dict(junk)
    data["Classnames"].clear()
    assert len(junk.classnames) == 4