import logging
from pathlib import Path

import pytest
import structlog

from dungeon3d import ConfigError, DungeonGenerator, GeneratorSettings, load_settings
from dungeon3d.logging_utils import setup_logging

SAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "config" / "dungeon3d.yaml"


def test_defaults_match_tuning_constants():
    settings = GeneratorSettings()
    assert settings.path_portion == 0.6
    assert settings.random_modifier == 0.1
    assert settings.legacy_direction_wrap is False
    assert settings.validate is False
    assert settings.seed is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"path_portion": 0.0},
        {"path_portion": 1.5},
        {"random_modifier": 0.0},
        {"seed": -1},
        {"seed": "abc"},
        {"path_portion": "0.5"},
        {"random_modifier": "0.1"},
        {"path_portion": True},
        {"validate": "yes"},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ConfigError):
        GeneratorSettings(**kwargs)


def test_sample_config_loads():
    settings = load_settings(SAMPLE_CONFIG)
    assert settings == GeneratorSettings()


def test_yaml_generator_section(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text("generator:\n  path_portion: 0.8\n  seed: 42\n  validate: true\n")
    settings = load_settings(path)
    assert settings.path_portion == 0.8
    assert settings.seed == 42
    assert settings.validate is True


def test_toml_top_level_keys(tmp_path):
    path = tmp_path / "gen.toml"
    path.write_text("random_modifier = 0.25\nlegacy_direction_wrap = true\n")
    settings = load_settings(path)
    assert settings.random_modifier == 0.25
    assert settings.legacy_direction_wrap is True


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_settings(path) == GeneratorSettings()


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text("generator:\n  room_size: 3\n")
    with pytest.raises(ConfigError, match="room_size"):
        load_settings(path)


def test_bad_files_raise_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "missing.yaml")
    broken = tmp_path / "broken.toml"
    broken.write_text("path_portion = = 1")
    with pytest.raises(ConfigError):
        load_settings(broken)
    other = tmp_path / "gen.json"
    other.write_text("{}")
    with pytest.raises(ConfigError):
        load_settings(other)


def test_generator_from_config(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text("generator:\n  seed: 17\n  path_portion: 1.0\n")
    generator = DungeonGenerator.from_config(path)
    assert generator.seed == 17
    assert generator.settings.path_portion == 1.0
    assert len(generator.generate(9)) == 9


def test_setup_logging_configures_structlog():
    try:
        setup_logging(logging.DEBUG, json_output=True)
        assert structlog.is_configured()
    finally:
        structlog.reset_defaults()


def test_quoted_number_in_yaml_rejected_at_load(tmp_path):
    path = tmp_path / "gen.yaml"
    path.write_text('generator:\n  path_portion: "0.5"\n')
    with pytest.raises(ConfigError, match="path_portion"):
        load_settings(path)
