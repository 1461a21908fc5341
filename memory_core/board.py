from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

CardState = str  # 'hidden', 'revealed', 'matched'

HIDDEN: CardState = 'hidden'
REVEALED: CardState = 'revealed'
MATCHED: CardState = 'matched'


@dataclass(frozen=True)
class Card:
    """A single slot on the board."""
    position: int
    symbol_id: str
    face: str
    state: CardState = HIDDEN

    def with_state(self, state: CardState) -> 'Card':
        return replace(self, state=state)


@dataclass(frozen=True)
class Board:
    """Represents the dealt grid: size x size cards in row-major order."""
    size: int
    cards: Tuple[Card, ...]  # length == size * size, cards[i].position == i

    @property
    def total_pairs(self) -> int:
        return len(self.cards) // 2

    def __len__(self) -> int:
        return len(self.cards)

    def card(self, position: int) -> Card:
        return self.cards[position]

    def contains(self, position: int) -> bool:
        return 0 <= position < len(self.cards)

    def positions_in(self, state: CardState) -> List[int]:
        return [c.position for c in self.cards if c.state == state]

    def with_states(self, positions: Iterable[int], state: CardState) -> 'Board':
        """Returns a new board with the given positions moved to `state`."""
        targets = set(positions)
        cards = tuple(c.with_state(state) if c.position in targets else c for c in self.cards)
        return Board(size=self.size, cards=cards)

    def pretty(self, reveal_all: bool = False) -> str:
        """Generates a human-readable grid; hidden cards show their position."""
        width = len(str(len(self.cards) - 1))
        lines: List[str] = []
        for r in range(self.size):
            row: List[str] = []
            for c in range(self.size):
                card = self.cards[r * self.size + c]
                if card.state == HIDDEN and not reveal_all:
                    row.append(f"[{card.position:>{width}}]")
                elif card.state == MATCHED:
                    row.append(f"({card.face:>{width}})")
                else:
                    row.append(f" {card.face:>{width}} ")
            lines.append(" ".join(row))
        return "\n".join(lines)
