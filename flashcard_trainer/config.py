from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .utils import load_json


@dataclass(frozen=True)
class TrainerConfig:
    random_seed: int | None = None
    encoding: str = "utf-8"
    log_level: str = "WARNING"


def load_config(config_path: str | Path | None = None) -> TrainerConfig:
    if config_path is None:
        return TrainerConfig()
    data = load_json(config_path)
    if not isinstance(data, dict):
        raise ValueError(f"config must be a JSON object: {config_path}")
    seed = data.get("random_seed")
    return TrainerConfig(
        random_seed=int(seed) if seed is not None else None,
        encoding=str(data.get("encoding", "utf-8")),
        log_level=str(data.get("log_level", "WARNING")).upper(),
    )
