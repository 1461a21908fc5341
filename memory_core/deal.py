from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .board import Board, Card
from .errors import InsufficientSymbolsError, InvalidSizeError
from .symbols import Symbol, distinct_symbols


def validate_size(size: object) -> int:
    """Checks that `size` is a positive even integer and returns it."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f'Grid size must be an integer, got {size!r}')
    if size < 2 or size % 2 != 0:
        raise InvalidSizeError(f'Grid size must be an even integer >= 2, got {size}')
    return size


def generate_board(
    size: int,
    symbol_pool: Sequence[Symbol],
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Deals a shuffled size x size board with every card face down.

    Picks size*size/2 distinct symbols from the pool without replacement,
    doubles them into pairs and shuffles them across the positions.
    """
    validate_size(size)
    rng = rng or random.Random(seed)
    pairs = size * size // 2
    pool = distinct_symbols(symbol_pool)
    if len(pool) < pairs:
        raise InsufficientSymbolsError(
            f'A {size}x{size} board needs {pairs} distinct symbols, pool has {len(pool)}'
        )
    chosen = rng.sample(pool, pairs)
    deck: List[Symbol] = chosen + chosen
    rng.shuffle(deck)
    cards = tuple(Card(position=i, symbol_id=sym.id, face=sym.face) for i, sym in enumerate(deck))
    return Board(size=size, cards=cards)
