from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from .board import Board
from .config import GameConfig, load_config
from .deal import generate_board, validate_size
from .errors import InvalidStateTransitionError
from .flips import MISMATCH, reveal, revert_mismatch
from .render import snapshot as _snapshot
from .scheduler import ScheduledTask, Scheduler
from .state import RUNNING, STOPPED, GameSnapshot, Session
from .symbols import DEFAULT_SYMBOLS, Symbol

logger = logging.getLogger(__name__)

Listener = Callable[[str, GameSnapshot], None]

UPDATE = 'update'
WON_EVENT = 'won'


class MemoryGame:
    """Owns one Board and Session and drives them through a game.

    Hosts feed `on_reveal(position)` and read snapshots; timer effects run
    through the injected Scheduler. Every scheduled callback is tagged with
    the session generation and dropped if a newer game has started since.
    """

    def __init__(
        self,
        symbol_pool: Optional[Sequence[Symbol]] = None,
        scheduler: Optional[Scheduler] = None,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.symbol_pool: Sequence[Symbol] = tuple(symbol_pool) if symbol_pool is not None else DEFAULT_SYMBOLS
        self.scheduler = scheduler or Scheduler()
        self.config = config or load_config()
        self._rng = rng
        self._board = Board(size=0, cards=tuple())
        self._session = Session()
        self._last_size: Optional[int] = None
        self._tick: Optional[ScheduledTask] = None
        self._reverts: List[Tuple[ScheduledTask, Tuple[int, ...]]] = []
        self._listeners: List[Listener] = []

    # ---------- read-only views ----------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def session(self) -> Session:
        return self._session

    @property
    def phase(self) -> str:
        return self._session.phase

    @property
    def moves(self) -> int:
        return self._session.moves

    @property
    def elapsed_seconds(self) -> int:
        return self._session.elapsed_seconds

    @property
    def matched_pairs(self) -> int:
        return self._session.matched_pairs

    @property
    def total_pairs(self) -> int:
        return self._session.total_pairs

    def snapshot(self) -> GameSnapshot:
        return _snapshot(self._board, self._session)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers `listener(event, snapshot)`; returns a function that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _emit(self, event: str) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(event, snap)
            except Exception:
                logger.exception('memory game listener failed on %s', event)

    # ---------- lifecycle ----------

    def start(self, size: Optional[int] = None, seed: Optional[int] = None) -> GameSnapshot:
        """Deals a new board and starts the clock.

        Raises InvalidSizeError or InsufficientSymbolsError; the previous
        game, if any, is left untouched in that case.
        """
        size = self.config.default_size if size is None else size
        validate_size(size)
        board = generate_board(size, self.symbol_pool, seed=seed, rng=None if seed is not None else self._rng)
        self._cancel_timers()
        generation = self._session.generation + 1
        self._board = board
        self._session = Session(
            size=size,
            total_pairs=board.total_pairs,
            phase=RUNNING,
            generation=generation,
        )
        self._last_size = size
        self._tick = self.scheduler.call_every(
            self.config.tick_seconds, lambda count: self._on_tick(generation, count)
        )
        logger.info('memory game %d started: %dx%d, %d pairs', generation, size, size, board.total_pairs)
        self._emit(UPDATE)
        return self.snapshot()

    def stop(self) -> GameSnapshot:
        """Halts the clock and leaves the board as it is. No-op unless running.

        A mismatched pair still waiting for its revert is turned face down
        now, since the cancelled revert would otherwise leave it stuck.
        """
        if self._session.phase != RUNNING:
            return self.snapshot()
        for _, pair in self._reverts:
            self._board = revert_mismatch(self._board, pair)
        self._cancel_timers()
        self._session = self._session.evolve(
            phase=STOPPED,
            generation=self._session.generation + 1,
        )
        logger.info('memory game stopped after %d moves, %ds', self.moves, self.elapsed_seconds)
        self._emit(UPDATE)
        return self.snapshot()

    def reset(self) -> GameSnapshot:
        """Play again with the last size used (or the default size)."""
        self.stop()
        return self.start(self._last_size)

    def sync(self) -> int:
        """Runs scheduled reverts and ticks that are due now."""
        return self.scheduler.run_due()

    # ---------- events ----------

    def on_reveal(self, position: int) -> bool:
        """Handles a click on `position`. Returns False when it was ignored."""
        self.sync()
        try:
            board, session, result = reveal(self._board, self._session, position)
        except InvalidStateTransitionError as e:
            logger.debug('ignored reveal of %r: %s', position, e)
            return False
        self._board, self._session = board, session

        if result.kind == MISMATCH:
            generation = session.generation
            pair = result.positions
            task = self.scheduler.call_later(
                self.config.mismatch_delay,
                lambda: self._on_revert(generation, pair),
            )
            self._reverts.append((task, pair))
        elif result.won:
            self._cancel_timers()
            logger.info('memory game %d won in %d moves, %ds', session.generation, session.moves, session.elapsed_seconds)

        self._emit(UPDATE)
        if result.won:
            self._emit(WON_EVENT)
        return True

    # ---------- scheduled callbacks ----------

    def _on_tick(self, generation: int, count: int = 1) -> None:
        if generation != self._session.generation or self._session.phase != RUNNING:
            logger.debug('dropped stale tick from game %d', generation)
            return
        self._session = self._session.evolve(elapsed_seconds=self._session.elapsed_seconds + count)
        self._emit(UPDATE)

    def _on_revert(self, generation: int, positions: Tuple[int, ...]) -> None:
        self._reverts = [(t, p) for t, p in self._reverts if p != positions]
        if generation != self._session.generation:
            logger.debug('dropped stale revert from game %d', generation)
            return
        self._board = revert_mismatch(self._board, positions)
        self._emit(UPDATE)

    def _cancel_timers(self) -> None:
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None
        for task, _ in self._reverts:
            task.cancel()
        self._reverts = []
