import json

import pytest

from classicpass.config import DEFAULTS, load_config, save_config, config_path, default_options, length_bounds
from classicpass.generator import GenerationOptions


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CLASSICPASS_CONFIG_DIR", str(tmp_path))
    return tmp_path

def test_missing_file_gives_defaults(config_dir):
    assert load_config() == DEFAULTS
    assert config_path() == str(config_dir / "config.json")

def test_save_and_load_merges_defaults():
    save_config({"length": 20, "include_symbols": False})
    cfg = load_config()
    assert cfg["length"] == 20
    assert cfg["include_symbols"] is False
    assert cfg["max_length"] == DEFAULTS["max_length"]

def test_corrupt_file_falls_back(config_dir):
    (config_dir / "config.json").write_text("{not json", encoding="utf-8")
    assert load_config() == DEFAULTS

def test_non_object_file_ignored(config_dir):
    (config_dir / "config.json").write_text(json.dumps([1, 2]), encoding="utf-8")
    assert load_config() == DEFAULTS

def test_default_options():
    assert default_options(DEFAULTS) == GenerationOptions(12, True, True, True)

def test_default_options_clamps_and_guards():
    cfg = dict(DEFAULTS, length=100, include_letters=False, include_numbers=False, include_symbols=False)
    assert default_options(cfg) == GenerationOptions(32, True, False, False)
    cfg = dict(DEFAULTS, length="oops")
    assert default_options(cfg).length == 12

def test_bad_numeric_settings_fall_back_to_defaults():
    cfg = dict(DEFAULTS, length=None, min_length="x", max_length=None)
    assert length_bounds(cfg) == (4, 32)
    assert default_options(cfg) == GenerationOptions(12, True, True, True)
