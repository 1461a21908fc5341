from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import time
from typing import Optional

from .board import REVEALED
from .config import load_config
from .engine import WON_EVENT, MemoryGame
from .errors import MemoryGameError
from .render import status_line, win_message
from .state import RUNNING, GameSnapshot


def _parse_position(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description='Memory matching game in the terminal')
    parser.add_argument('--size', type=int, default=None, help='Grid size (NxN, even): 2, 4 or 6')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--delay', type=float, default=None, help='Seconds a mismatched pair stays visible')
    parser.add_argument('--show', action='store_true', help='Print the solved board before playing')
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv('LOG_LEVEL', 'WARNING').upper())
    config = load_config()
    if args.delay is not None:
        try:
            config = dataclasses.replace(config, mismatch_delay=args.delay)
        except ValueError as e:
            parser.error(str(e))

    game = MemoryGame(config=config)

    def on_event(event: str, snap: GameSnapshot) -> None:
        if event == WON_EVENT:
            print(game.board.pretty())
            print(win_message(snap))

    game.subscribe(on_event)
    try:
        game.start(args.size, seed=args.seed)
    except MemoryGameError as e:
        parser.error(str(e))

    if args.show:
        print('Solution:')
        print(game.board.pretty(reveal_all=True))
        print()

    while game.phase == RUNNING:
        game.sync()
        print(game.board.pretty())
        print(status_line(game.snapshot()))
        try:
            text = input("Reveal position (q to quit): ").strip().lower()
        except EOFError:
            text = 'q'
        if text in ('q', 'quit', 'exit'):
            game.stop()
            print('Game stopped.')
            print(status_line(game.snapshot()))
            return
        pos = _parse_position(text)
        if pos is None or not game.on_reveal(pos):
            print('Cannot reveal that. Try again.')
            continue
        if game.session.pending_first is None and game.phase == RUNNING and game.board.card(pos).state == REVEALED:
            # Mismatch: show both cards until the revert fires.
            print(game.board.pretty())
            time.sleep(config.mismatch_delay)
            game.sync()
