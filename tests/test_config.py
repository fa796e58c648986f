import logging

import pytest
import yaml

from gridpath.config import CONFIG_ENV_VAR, AppConfig, load_config


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config()

    assert config == AppConfig()
    assert (config.grid_width, config.grid_height, config.cell_size) == (20, 20, 30)
    assert config.search_step_budget is None


def test_missing_file_falls_back_to_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yaml") == AppConfig()


def test_load_from_yaml(tmp_path):
    path = tmp_path / "gridpath.yaml"
    path.write_text(yaml.safe_dump({
        "grid_width": 30,
        "grid_height": 15,
        "log_level": "debug",
        "search_step_budget": 500,
    }))

    config = load_config(path)

    assert config.grid_width == 30
    assert config.grid_height == 15
    assert config.log_level == "DEBUG"
    assert config.search_step_budget == 500


def test_env_var_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("cell_size: 12\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().cell_size == 12


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / "extra.yaml"
    path.write_text("grid_width: 9\ncolour: teal\n")

    with caplog.at_level(logging.WARNING, logger="gridpath.config"):
        config = load_config(path)

    assert config.grid_width == 9
    assert "colour" in caplog.text


def test_non_mapping_file_is_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        AppConfig(grid_width=0)
