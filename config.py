"""
Engine configuration.

Reads a small YAML file such as:

    dijkstra_engine: heap        # brute_force | heap
    visit_delay_sec: 0.05        # pause after each visit/finish, 0 disables
    log_level: INFO

Engine names and level names are case-insensitive; log_level also accepts
a numeric level (10, 20, ...). LOG_LEVEL in the environment overrides the
file's log_level.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import logging
import math
import os

from algorithms import DijkstraEngine
from dijkstra_engine import BruteForceDijkstraEngine, HeapDijkstraEngine
from observers import GraphAlgorithmObserver, LoggingObserver, PacedObserver


class DijkstraStrategy(Enum):
    """
    Selection strategy for Dijkstra's next finished vertex.

    BRUTE_FORCE: linear scan over unfinished vertices.
    HEAP: binary heap; same finishing order, faster on large graphs.
    """

    BRUTE_FORCE = "brute_force"
    HEAP = "heap"


@dataclass(frozen=True)
class EngineConfig:
    dijkstra_engine: DijkstraStrategy = DijkstraStrategy.BRUTE_FORCE
    visit_delay_sec: float = 0.0
    log_level: str = "INFO"


_KNOWN_KEYS = {"dijkstra_engine", "visit_delay_sec", "log_level"}


def _parse_log_level(raw: Any) -> str:
    # Accept names ("info") and numeric levels (20 or "20").
    if isinstance(raw, str) and raw.strip().isdigit():
        raw = int(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        name = logging.getLevelName(raw)
        if name.startswith("Level "):
            raise ValueError(f"log_level {raw!r} is not a logging level")
        return name
    level = str(raw).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"log_level {raw!r} is not a logging level")
    return level


def config_from_mapping(data: Optional[Mapping[str, Any]]) -> EngineConfig:
    data = dict(data or {})
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    defaults = EngineConfig()
    engine_name = data.get("dijkstra_engine", defaults.dijkstra_engine.value)
    try:
        strategy = DijkstraStrategy(str(engine_name).lower())
    except ValueError:
        raise ValueError(
            f"dijkstra_engine must be one of {[s.value for s in DijkstraStrategy]}, "
            f"got {engine_name!r}"
        ) from None

    raw_delay = data.get("visit_delay_sec", defaults.visit_delay_sec)
    try:
        delay = float(raw_delay)
    except (TypeError, ValueError):
        delay = math.nan
    if isinstance(raw_delay, bool) or not delay >= 0:
        raise ValueError(f"visit_delay_sec must be a non-negative number, got {raw_delay!r}")

    level = _parse_log_level(os.environ.get("LOG_LEVEL") or data.get("log_level", defaults.log_level))

    return EngineConfig(dijkstra_engine=strategy, visit_delay_sec=delay, log_level=level)


def load_config(path: Path) -> EngineConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text())
    return config_from_mapping(data)


_ENGINES: Dict[DijkstraStrategy, type] = {
    DijkstraStrategy.BRUTE_FORCE: BruteForceDijkstraEngine,
    DijkstraStrategy.HEAP: HeapDijkstraEngine,
}


def make_dijkstra_engine(strategy: DijkstraStrategy | str) -> DijkstraEngine:
    """Instantiate the engine for a strategy or its config name."""
    if isinstance(strategy, str):
        strategy = strategy.lower()
    return _ENGINES[DijkstraStrategy(strategy)]()


def build_observers(cfg: EngineConfig, logger: Optional[logging.Logger] = None) -> List[GraphAlgorithmObserver]:
    """
    Observer stack for a config: a LoggingObserver, paced when
    visit_delay_sec is positive.
    """
    observer: GraphAlgorithmObserver = LoggingObserver(logger)
    if cfg.visit_delay_sec > 0:
        observer = PacedObserver(observer, cfg.visit_delay_sec)
    return [observer]


def configure_logging(level: str | int) -> None:
    """Set the root logger level, e.g. configure_logging(cfg.log_level)."""
    # basicConfig is a no-op once handlers exist, so set the level explicitly.
    logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logging.getLogger().setLevel(level)
