from __future__ import annotations

# Facade module that re-exports the memory game core.
# The Flask app, the CLI and tests import from here; single-responsibility
# modules live under memory_core/*.

from memory_core.board import HIDDEN, MATCHED, REVEALED, Board, Card, CardState  # noqa: F401
from memory_core.config import GameConfig, load_config  # noqa: F401
from memory_core.deal import generate_board, validate_size  # noqa: F401
from memory_core.engine import UPDATE, WON_EVENT, MemoryGame  # noqa: F401
from memory_core.errors import (  # noqa: F401
    InsufficientSymbolsError,
    InvalidSizeError,
    InvalidStateTransitionError,
    MemoryGameError,
)
from memory_core.flips import (  # noqa: F401
    FIRST,
    MATCH,
    MISMATCH,
    FlipResult,
    check_reveal,
    reveal,
    revert_mismatch,
)
from memory_core.render import card_views, format_clock, snapshot, status_line, win_message  # noqa: F401
from memory_core.scheduler import ManualClock, ScheduledTask, Scheduler  # noqa: F401
from memory_core.state import IDLE, RUNNING, STOPPED, WON, CardView, GameSnapshot, Session  # noqa: F401
from memory_core.symbols import DEFAULT_SYMBOLS, Symbol  # noqa: F401


def main() -> None:
    # CLI driver delegated to memory_core.cli
    from memory_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
