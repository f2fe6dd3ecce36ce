"""Default tuning values and the per-session GameConfig built from them"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

CONFIG = {
    "COLS": 10,
    "ROWS": 24,
    "CELL_SIZE": 30,
    "GRAVITY_MS": 1000,
    "MOVE_REPEAT_MS": 200,
    "FRAME_MS": 16,
    "SPAWN_COLUMN": 4,
    "SEED": None,
    "SOFT_DROP_LOCKS": False,
}


@dataclass(frozen=True)
class GameConfig:
    cols: int = CONFIG["COLS"]
    rows: int = CONFIG["ROWS"]
    cell_size: int = CONFIG["CELL_SIZE"]
    gravity_ms: float = CONFIG["GRAVITY_MS"]
    move_repeat_ms: float = CONFIG["MOVE_REPEAT_MS"]
    frame_ms: float = CONFIG["FRAME_MS"]
    spawn_column: int = CONFIG["SPAWN_COLUMN"]
    seed: Optional[int] = CONFIG["SEED"]
    soft_drop_locks: bool = CONFIG["SOFT_DROP_LOCKS"]

    def __post_init__(self):
        for name in ("cols", "rows", "cell_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("gravity_ms", "move_repeat_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.frame_ms < 0:
            raise ValueError(f"frame_ms must be >= 0, got {self.frame_ms!r}")
        if not 0 <= self.spawn_column < self.cols:
            raise ValueError(f"spawn_column {self.spawn_column} outside [0, {self.cols})")

    @classmethod
    def from_dict(cls, overrides: Optional[Dict[str, Any]] = None) -> "GameConfig":
        """Build a config from CONFIG-style keys (``{"COLS": 12}``); unknown keys raise KeyError."""
        values = dict(CONFIG)
        for key, val in (overrides or {}).items():
            if key not in CONFIG:
                raise KeyError(f"unknown config key {key!r}")
            values[key] = val
        names = {f.name for f in fields(cls)}
        return cls(**{k.lower(): v for k, v in values.items() if k.lower() in names})
