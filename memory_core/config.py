from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    default_size: int = 4
    mismatch_delay: float = 0.9  # seconds a mismatched pair stays face up
    tick_seconds: float = 1.0
    max_games: int = 256  # per-process limit for the web host

    def __post_init__(self) -> None:
        if self.tick_seconds <= 0:
            raise ValueError(f'tick_seconds must be positive, got {self.tick_seconds}')
        if self.mismatch_delay < 0:
            raise ValueError(f'mismatch_delay cannot be negative, got {self.mismatch_delay}')
        if self.max_games < 1:
            raise ValueError(f'max_games must be at least 1, got {self.max_games}')


def load_config() -> GameConfig:
    """Reads MEMORY_* environment variables, falling back to the defaults."""
    defaults = GameConfig()
    return GameConfig(
        default_size=int(os.getenv('MEMORY_DEFAULT_SIZE', str(defaults.default_size))),
        mismatch_delay=float(os.getenv('MEMORY_MISMATCH_DELAY', str(defaults.mismatch_delay))),
        tick_seconds=float(os.getenv('MEMORY_TICK_SECONDS', str(defaults.tick_seconds))),
        max_games=int(os.getenv('MEMORY_MAX_GAMES', str(defaults.max_games))),
    )
