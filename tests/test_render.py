import unittest

from game import (
    DEFAULT_SYMBOLS,
    HIDDEN,
    REVEALED,
    RUNNING,
    WON,
    Session,
    card_views,
    format_clock,
    generate_board,
    snapshot,
    status_line,
    win_message,
)


class TestRender(unittest.TestCase):
    def test_given_seconds_when_formatting_then_mm_ss(self):
        self.assertEqual(format_clock(0), '00:00')
        self.assertEqual(format_clock(9), '00:09')
        self.assertEqual(format_clock(61), '01:01')
        self.assertEqual(format_clock(3600), '60:00')
        self.assertEqual(format_clock(-5), '00:00')

    def test_given_board_when_projecting_then_hidden_cards_carry_no_symbol(self):
        board = generate_board(2, DEFAULT_SYMBOLS, seed=1).with_states([0], REVEALED)
        views = card_views(board)
        self.assertEqual(views[0].state, REVEALED)
        self.assertEqual(views[0].symbol_id, board.card(0).symbol_id)
        self.assertEqual(views[0].face, board.card(0).face)
        for v in views[1:]:
            self.assertEqual(v.state, HIDDEN)
            self.assertIsNone(v.symbol_id)
            self.assertIsNone(v.face)

    def test_given_session_when_snapshotting_then_counters_copied(self):
        board = generate_board(4, DEFAULT_SYMBOLS, seed=2)
        session = Session(size=4, total_pairs=8, moves=5, elapsed_seconds=75, matched_pairs=3, phase=RUNNING, generation=2)
        snap = snapshot(board, session)
        self.assertEqual((snap.size, snap.moves, snap.elapsed_seconds), (4, 5, 75))
        self.assertEqual((snap.matched_pairs, snap.total_pairs, snap.phase, snap.generation), (3, 8, RUNNING, 2))
        self.assertFalse(snap.won)
        self.assertIn('Moves: 5', status_line(snap))
        self.assertIn('01:15', status_line(snap))

        won = snapshot(board, session.evolve(phase=WON, matched_pairs=8))
        self.assertTrue(won.won)
        self.assertEqual(win_message(won), 'You Won! Moves: 5 Time: 01:15')


if __name__ == '__main__':
    unittest.main(verbosity=2)
