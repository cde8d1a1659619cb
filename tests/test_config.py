"""
Tests for YAML engine configuration.
"""

from pathlib import Path
import logging

import pytest

from config import (
    DijkstraStrategy,
    EngineConfig,
    build_observers,
    configure_logging,
    config_from_mapping,
    load_config,
    make_dijkstra_engine,
)
from dijkstra_engine import BruteForceDijkstraEngine, HeapDijkstraEngine
from observers import LoggingObserver, PacedObserver


@pytest.fixture(autouse=True)
def _no_log_level_env(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_load_config_reads_yaml(tmp_path: Path):
    cfg_path = tmp_path / "engine.yml"
    cfg_path.write_text(
        """
dijkstra_engine: heap
visit_delay_sec: 0.1
log_level: debug
"""
    )

    cfg = load_config(cfg_path)

    assert cfg == EngineConfig(
        dijkstra_engine=DijkstraStrategy.HEAP,
        visit_delay_sec=0.1,
        log_level="DEBUG",
    )


def test_empty_file_gives_defaults(tmp_path: Path):
    cfg_path = tmp_path / "empty.yml"
    cfg_path.write_text("")

    assert load_config(cfg_path) == EngineConfig()


def test_env_overrides_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    cfg = config_from_mapping({"log_level": "DEBUG"})
    assert cfg.log_level == "WARNING"


@pytest.mark.parametrize(
    "data",
    [
        {"dijkstra_engine": "fibonacci"},
        {"visit_delay_sec": -0.5},
        {"visit_delay_sec": None},
        {"visit_delay_sec": "fast"},
        {"visit_delay_sec": "nan"},
        {"log_level": 15},
        {"log_level": "LOUD"},
        {"speed": 3},
    ],
)
def test_invalid_values_rejected(data):
    with pytest.raises(ValueError):
        config_from_mapping(data)


def test_make_dijkstra_engine():
    assert isinstance(make_dijkstra_engine("brute_force"), BruteForceDijkstraEngine)
    assert isinstance(make_dijkstra_engine(DijkstraStrategy.HEAP), HeapDijkstraEngine)


def test_build_observers_paces_when_delay_set():
    (plain,) = build_observers(EngineConfig())
    assert isinstance(plain, LoggingObserver)

    (paced,) = build_observers(EngineConfig(visit_delay_sec=0.2))
    assert isinstance(paced, PacedObserver)
    assert isinstance(paced.inner, LoggingObserver)
    assert paced.delay_sec == 0.2


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(EngineConfig(log_level="DEBUG").log_level)
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


@pytest.mark.parametrize("value", [None, "fast"])
def test_bad_delay_error_names_the_key(value):
    with pytest.raises(ValueError, match="visit_delay_sec"):
        config_from_mapping({"visit_delay_sec": value})


@pytest.mark.parametrize("value, expected", [(10, "DEBUG"), ("30", "WARNING"), ("error", "ERROR")])
def test_numeric_and_named_log_levels(value, expected):
    assert config_from_mapping({"log_level": value}).log_level == expected


def test_engine_name_is_case_insensitive():
    assert config_from_mapping({"dijkstra_engine": "HEAP"}).dijkstra_engine is DijkstraStrategy.HEAP
    assert isinstance(make_dijkstra_engine("Brute_Force"), BruteForceDijkstraEngine)
