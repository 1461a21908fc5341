from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Symbol:
    """A card face. Two cards match when their ids are equal."""
    id: str
    face: str


DEFAULT_SYMBOLS: Tuple[Symbol, ...] = (
    Symbol('bee', '🐝'),
    Symbol('crocodile', '🐊'),
    Symbol('macaw', '🦜'),
    Symbol('gorilla', '🦍'),
    Symbol('tiger', '🐅'),
    Symbol('monkey', '🐒'),
    Symbol('lion', '🦁'),
    Symbol('cow', '🐄'),
    # Extra faces so 6x6 boards can be dealt.
    Symbol('owl', '🦉'),
    Symbol('turtle', '🐢'),
    Symbol('octopus', '🐙'),
    Symbol('frog', '🐸'),
    Symbol('panda', '🐼'),
    Symbol('fox', '🦊'),
    Symbol('whale', '🐳'),
    Symbol('snail', '🐌'),
    Symbol('penguin', '🐧'),
    Symbol('zebra', '🦓'),
)


def distinct_symbols(pool: Iterable[Symbol]) -> List[Symbol]:
    """Drops repeated ids, keeping the first occurrence."""
    seen = set()
    out: List[Symbol] = []
    for sym in pool:
        if sym.id in seen:
            continue
        seen.add(sym.id)
        out.append(sym)
    return out
