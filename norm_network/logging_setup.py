"""Logging configuration for the norm network."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class LoggerConfig:
    level: int = logging.INFO
    fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(config: Optional[LoggerConfig] = None) -> Dict[str, logging.Logger]:
    cfg = config or LoggerConfig()
    logging.basicConfig(level=cfg.level, format=cfg.fmt)
    package = logging.getLogger("norm_network")
    package.setLevel(cfg.level)
    return {
        "network": package,
        "graph": logging.getLogger("norm_network.graph"),
        "generalisation": logging.getLogger("norm_network.generalisation"),
        "window": logging.getLogger("norm_network.window"),
        "evaluation": logging.getLogger("norm_network.evaluation"),
    }
