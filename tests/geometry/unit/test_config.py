from __future__ import annotations

from geometry.config import GeometryConfig, get_config, load_config, set_config


def test_load_config_defaults() -> None:
    cfg = load_config(env={})
    assert cfg == GeometryConfig()
    assert cfg.file_path is None


def test_load_config_parses_values() -> None:
    cfg = load_config(
        env={
            "GEOMETRY_LOG_LEVEL": "debug",
            "GEOMETRY_LOG_FORMAT": "JSON",
            "GEOMETRY_LOG_FILE": "logs/geometry.jsonl",
            "GEOMETRY_LOG_FILE_FORMAT": "text",
            "GEOMETRY_ABS_TOLERANCE": "0.001",
            "GEOMETRY_GRID_TRACE": "yes",
        }
    )
    assert cfg.log_level_name == "DEBUG"
    assert cfg.console_format == "json"
    assert cfg.file_path == "logs/geometry.jsonl"
    assert cfg.file_format == "text"
    assert cfg.abs_tolerance == 0.001
    assert cfg.grid_trace_enabled is True


def test_load_config_falls_back_on_bad_values() -> None:
    cfg = load_config(
        env={
            "LOG_LEVEL": "warning",
            "GEOMETRY_LOG_FORMAT": "xml",
            "GEOMETRY_ABS_TOLERANCE": "-5",
            "GEOMETRY_GRID_TRACE": "maybe",
        }
    )
    assert cfg.log_level_name == "WARNING"
    assert cfg.console_format == "text"
    assert cfg.abs_tolerance == 0.0
    assert cfg.grid_trace_enabled is False


def test_load_config_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("GEOMETRY_ABS_TOLERANCE", "0.5")
    assert load_config().abs_tolerance == 0.5


def test_set_config_is_returned_by_get_config() -> None:
    cfg = GeometryConfig(abs_tolerance=0.25)
    assert set_config(cfg) is cfg
    assert get_config() is cfg
