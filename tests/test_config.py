"""Tests for keep/config.py: YAML settings and env overrides."""

from pathlib import Path

import yaml

from keep.config import DEFAULT_OVERDUE_LIMIT, data_path, load_settings


def test_defaults_without_config(tmp_path, monkeypatch):
    monkeypatch.delenv("KEEP_DATA_FILE", raising=False)
    monkeypatch.delenv("KEEP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("KEEP_LOG_DIR", raising=False)
    settings = load_settings(tmp_path / "nope.yaml")
    assert settings.data_file == Path.home() / ".keep_tasks.json"
    assert settings.overdue_limit == DEFAULT_OVERDUE_LIMIT
    assert settings.log_level == "INFO"


def test_yaml_values(tmp_path, monkeypatch):
    monkeypatch.delenv("KEEP_DATA_FILE", raising=False)
    monkeypatch.delenv("KEEP_LOG_LEVEL", raising=False)
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        yaml.dump({
            "data_file": str(tmp_path / "tasks.json"),
            "overdue_limit": 3,
            "log_level": "debug",
        }),
        encoding="utf-8",
    )
    settings = load_settings(cfg)
    assert settings.data_file == tmp_path / "tasks.json"
    assert settings.overdue_limit == 3
    assert settings.log_level == "DEBUG"


def test_bad_values_fall_back(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("overdue_limit: -2\nlog_level: chatty\n", encoding="utf-8")
    settings = load_settings(cfg)
    assert settings.overdue_limit == DEFAULT_OVERDUE_LIMIT
    assert settings.log_level == "INFO"


def test_malformed_yaml_gives_defaults(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("overdue_limit: [unclosed\n", encoding="utf-8")
    settings = load_settings(cfg)
    assert settings.overdue_limit == DEFAULT_OVERDUE_LIMIT


def test_env_overrides_file(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text(f"data_file: {tmp_path / 'from-file.json'}\n", encoding="utf-8")
    monkeypatch.setenv("KEEP_DATA_FILE", str(tmp_path / "from-env.json"))
    monkeypatch.setenv("KEEP_LOG_LEVEL", "warning")
    settings = load_settings(cfg)
    assert settings.data_file == tmp_path / "from-env.json"
    assert settings.log_level == "WARNING"


def test_data_path_uses_env(data_file):
    assert data_path() == data_file.resolve()
