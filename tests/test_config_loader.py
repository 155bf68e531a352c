import json

import pytest

from config.config_loader import DEFAULT_CONFIG, load_config, validate_config


def write_config(tmp_path, overrides):
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(overrides), encoding="utf-8")
    return path


def test_defaults_without_file():
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_overrides_merge_over_defaults(tmp_path):
    config = load_config(write_config(tmp_path, {"step_limit": 500, "verbose": True}))
    assert config["step_limit"] == 500
    assert config["verbose"] is True
    assert config["batch_size"] == DEFAULT_CONFIG["batch_size"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.json")


def test_wrong_type(tmp_path):
    with pytest.raises(TypeError):
        load_config(write_config(tmp_path, {"verbose": "yes"}))


def test_bool_is_not_an_int(tmp_path):
    with pytest.raises(TypeError):
        load_config(write_config(tmp_path, {"step_limit": True}))


def test_negative_step_limit(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_config(tmp_path, {"step_limit": -1}))


def test_missing_key():
    config = DEFAULT_CONFIG.copy()
    del config["batch_size"]
    with pytest.raises(ValueError):
        validate_config(config)


def test_log_runs_creates_output_directory(tmp_path):
    logs = tmp_path / "logs"
    load_config(write_config(tmp_path, {"log_runs": True, "output_directory": str(logs)}))
    assert logs.is_dir()


def test_echo_prints_summary(capsys):
    load_config(echo=True)
    out = capsys.readouterr().out
    assert "Loaded config" in out
    assert "step_limit: None" in out


def test_shipped_config_is_valid():
    from pathlib import Path

    path = Path(__file__).resolve().parent.parent / "config" / "runtime_config.json"
    config = load_config(path)
    assert config["step_limit"] == 100000
