from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

Phase = str  # 'idle', 'running', 'won', 'stopped'

IDLE: Phase = 'idle'
RUNNING: Phase = 'running'
WON: Phase = 'won'
STOPPED: Phase = 'stopped'


@dataclass(frozen=True)
class Session:
    """Counters and lifecycle of one game, paired with its Board."""
    size: int = 0
    total_pairs: int = 0
    moves: int = 0
    elapsed_seconds: int = 0
    matched_pairs: int = 0
    pending_first: Optional[int] = None
    phase: Phase = IDLE
    generation: int = 0

    def evolve(self, **changes) -> 'Session':
        return replace(self, **changes)


@dataclass(frozen=True)
class CardView:
    position: int
    state: str
    symbol_id: Optional[str] = None  # None while the card is face down
    face: Optional[str] = None


@dataclass(frozen=True)
class GameSnapshot:
    """What a host may see of a game after any mutation."""
    size: int
    cards: Tuple[CardView, ...]
    moves: int
    elapsed_seconds: int
    matched_pairs: int
    total_pairs: int
    phase: Phase
    generation: int

    @property
    def won(self) -> bool:
        return self.phase == WON
