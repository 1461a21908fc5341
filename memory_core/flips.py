from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .board import HIDDEN, MATCHED, REVEALED, Board
from .errors import InvalidStateTransitionError
from .state import RUNNING, WON, Session

FIRST = 'first'
MATCH = 'match'
MISMATCH = 'mismatch'


@dataclass(frozen=True)
class FlipResult:
    """Outcome of one accepted reveal."""
    kind: str  # FIRST, MATCH or MISMATCH
    positions: Tuple[int, ...]  # the first card, then the second when a pair was completed
    won: bool = False


def check_reveal(board: Board, session: Session, position: int) -> None:
    """Raises InvalidStateTransitionError if `position` may not be revealed now."""
    if session.phase != RUNNING:
        raise InvalidStateTransitionError(f'cannot reveal while {session.phase}')
    if isinstance(position, bool) or not isinstance(position, int) or not board.contains(position):
        raise InvalidStateTransitionError(f'position {position!r} is off the board')
    state = board.card(position).state
    if state != HIDDEN:
        raise InvalidStateTransitionError(f'card {position} is already {state}')


def reveal(board: Board, session: Session, position: int) -> Tuple[Board, Session, FlipResult]:
    """Applies a reveal and returns the new board, session and what happened.

    The first card of an attempt is only turned over. The second one counts
    a move and either matches both cards or leaves both revealed for the
    caller to turn back after its display delay.
    """
    check_reveal(board, session, position)
    board = board.with_states([position], REVEALED)
    first = session.pending_first
    if first is None:
        return board, session.evolve(pending_first=position), FlipResult(FIRST, (position,))

    moves = session.moves + 1
    pair = (first, position)
    if board.card(first).symbol_id != board.card(position).symbol_id:
        return board, session.evolve(moves=moves, pending_first=None), FlipResult(MISMATCH, pair)

    matched = session.matched_pairs + 1
    won = matched == session.total_pairs
    session = session.evolve(
        moves=moves,
        matched_pairs=matched,
        pending_first=None,
        phase=WON if won else session.phase,
    )
    return board.with_states(pair, MATCHED), session, FlipResult(MATCH, pair, won=won)


def revert_mismatch(board: Board, positions: Iterable[int]) -> Board:
    """Turns the given cards face down again if they are still revealed."""
    still_up = [p for p in positions if board.card(p).state == REVEALED]
    return board.with_states(still_up, HIDDEN) if still_up else board

