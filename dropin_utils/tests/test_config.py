"""Settings defaults, JSON files and environment overrides."""
from __future__ import annotations

import json

import pytest

from dropin_utils.config import CableSettings, UtilitySettings, load_settings


def test_defaults_match_component_defaults():
    settings = UtilitySettings()
    assert settings.cable == CableSettings(segments=9, slack=0.2, method="newton")
    assert settings.interpolator.max_speed == 1.0
    assert settings.interpolator.braking_acceleration == 0.0
    assert settings.envelope.sustain == 0.5
    assert settings.envelope.interrupt is False


def test_from_mapping_coerces_values():
    settings = UtilitySettings.from_mapping({"cable": {"segments": "12", "slack": 1}, "envelope": {"attack": 0.25}})
    assert settings.cable.segments == 12
    assert settings.cable.slack == 1.0
    assert isinstance(settings.cable.slack, float)
    assert settings.envelope.attack == 0.25
    assert settings.interpolator == UtilitySettings().interpolator


def test_environment_overrides_each_section():
    env = {
        "DROPIN_CABLE_SEGMENTS": "4",
        "DROPIN_INTERPOLATOR_BRAKING_ACCELERATION": "2.5",
        "DROPIN_ENVELOPE_INTERRUPT": "yes",
        "DROPIN_ENVELOPE_RELEASE_EASE": "-1.5",
        "UNRELATED": "1",
    }
    settings = UtilitySettings.from_environment(env)
    assert settings.cable.segments == 4
    assert settings.interpolator.braking_acceleration == 2.5
    assert settings.envelope.interrupt is True
    assert settings.envelope.release_ease == -1.5


def test_custom_environment_prefix():
    settings = UtilitySettings.from_environment({"SIM_CABLE_METHOD": "step"}, prefix="SIM")
    assert settings.cable.method == "step"


@pytest.mark.parametrize(
    "payload",
    [
        {"cable": {"segments": "many"}},
        {"cable": {"segments": 0}},
        {"cable": {"method": "guess"}},
        {"interpolator": {"max_speed": -1}},
        {"envelope": {"sustain": 1.5}},
    ],
)
def test_invalid_values_raise(payload):
    with pytest.raises(ValueError):
        UtilitySettings.from_mapping(payload)


def test_load_settings_reads_json_then_environment(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"cable": {"segments": 20, "slack": 0.5}}), encoding="utf-8")
    settings = load_settings(str(path), env={"DROPIN_CABLE_SLACK": "0.75"})
    assert settings.cable.segments == 20
    assert settings.cable.slack == 0.75


def test_load_settings_rejects_non_object_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(path), env={})


def test_load_settings_without_file_uses_defaults():
    assert load_settings(env={}) == UtilitySettings()
