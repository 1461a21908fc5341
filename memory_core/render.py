from __future__ import annotations

from typing import Tuple

from .board import HIDDEN, Board
from .state import GameSnapshot, Session, CardView


def card_views(board: Board) -> Tuple[CardView, ...]:
    """Projects the board for display; face-down cards carry no symbol."""
    views = []
    for card in board.cards:
        if card.state == HIDDEN:
            views.append(CardView(position=card.position, state=card.state))
        else:
            views.append(CardView(card.position, card.state, card.symbol_id, card.face))
    return tuple(views)


def snapshot(board: Board, session: Session) -> GameSnapshot:
    return GameSnapshot(
        size=board.size,
        cards=card_views(board),
        moves=session.moves,
        elapsed_seconds=session.elapsed_seconds,
        matched_pairs=session.matched_pairs,
        total_pairs=session.total_pairs,
        phase=session.phase,
        generation=session.generation,
    )


def format_clock(seconds: int) -> str:
    """Formats elapsed seconds as mm:ss."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


def win_message(snap: GameSnapshot) -> str:
    return f"You Won! Moves: {snap.moves} Time: {format_clock(snap.elapsed_seconds)}"


def status_line(snap: GameSnapshot) -> str:
    return (
        f"Moves: {snap.moves}  Time: {format_clock(snap.elapsed_seconds)}  "
        f"Pairs: {snap.matched_pairs}/{snap.total_pairs}  [{snap.phase}]"
    )
