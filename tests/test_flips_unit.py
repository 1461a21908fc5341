import unittest

from game import (
    FIRST,
    HIDDEN,
    MATCH,
    MATCHED,
    MISMATCH,
    REVEALED,
    RUNNING,
    STOPPED,
    WON,
    Board,
    Card,
    InvalidStateTransitionError,
    Session,
    check_reveal,
    reveal,
    revert_mismatch,
)


def _mk_board(ids, states=None):
    size = int(len(ids) ** 0.5)
    assert size * size == len(ids)
    states = states or [HIDDEN] * len(ids)
    cards = tuple(Card(position=i, symbol_id=s, face=s.upper(), state=st) for i, (s, st) in enumerate(zip(ids, states)))
    return Board(size=size, cards=cards)


def _running(board):
    return Session(size=board.size, total_pairs=board.total_pairs, phase=RUNNING, generation=1)


class TestFlipsUnit(unittest.TestCase):
    def test_given_no_pending_card_when_revealing_then_first_card_and_no_move(self):
        board = _mk_board(['a', 'b', 'a', 'b'])
        b2, s2, res = reveal(board, _running(board), 0)
        self.assertEqual(res.kind, FIRST)
        self.assertEqual(res.positions, (0,))
        self.assertEqual(b2.card(0).state, REVEALED)
        self.assertEqual(s2.pending_first, 0)
        self.assertEqual(s2.moves, 0)
        # Input board is untouched
        self.assertEqual(board.card(0).state, HIDDEN)

    def test_given_pending_card_when_revealing_partner_then_both_matched(self):
        board = _mk_board(['a', 'b', 'a', 'b'])
        b1, s1, _ = reveal(board, _running(board), 0)
        b2, s2, res = reveal(b1, s1, 2)
        self.assertEqual(res.kind, MATCH)
        self.assertEqual(res.positions, (0, 2))
        self.assertFalse(res.won)
        self.assertEqual(b2.card(0).state, MATCHED)
        self.assertEqual(b2.card(2).state, MATCHED)
        self.assertEqual((s2.moves, s2.matched_pairs, s2.pending_first, s2.phase), (1, 1, None, RUNNING))

    def test_given_pending_card_when_revealing_other_symbol_then_mismatch_stays_revealed(self):
        board = _mk_board(['a', 'b', 'a', 'b'])
        b1, s1, _ = reveal(board, _running(board), 0)
        b2, s2, res = reveal(b1, s1, 1)
        self.assertEqual(res.kind, MISMATCH)
        self.assertEqual(res.positions, (0, 1))
        self.assertEqual(b2.card(0).state, REVEALED)
        self.assertEqual(b2.card(1).state, REVEALED)
        self.assertEqual((s2.moves, s2.matched_pairs, s2.pending_first), (1, 0, None))

    def test_given_last_pair_when_matched_then_won(self):
        board = _mk_board(['a', 'b', 'a', 'b'], [MATCHED, HIDDEN, MATCHED, HIDDEN])
        session = _running(board).evolve(matched_pairs=1, moves=3)
        b1, s1, _ = reveal(board, session, 1)
        b2, s2, res = reveal(b1, s1, 3)
        self.assertTrue(res.won)
        self.assertEqual(s2.phase, WON)
        self.assertEqual(s2.matched_pairs, 2)
        self.assertEqual(s2.moves, 4)
        self.assertEqual(b2.positions_in(MATCHED), [0, 1, 2, 3])

    def test_given_illegal_reveals_when_checking_then_invalid_transition(self):
        board = _mk_board(['a', 'b', 'a', 'b'], [MATCHED, REVEALED, MATCHED, HIDDEN])
        running = _running(board)
        for pos in (0, 1, -1, 4, True, '3'):
            with self.assertRaises(InvalidStateTransitionError, msg=repr(pos)):
                check_reveal(board, running, pos)
        for phase in ('idle', STOPPED, WON):
            with self.assertRaises(InvalidStateTransitionError):
                check_reveal(board, running.evolve(phase=phase), 3)
        check_reveal(board, running, 3)  # hidden card on a running game is fine

    def test_given_revealed_cards_when_reverting_then_only_revealed_go_hidden(self):
        board = _mk_board(['a', 'b', 'a', 'b'], [REVEALED, REVEALED, MATCHED, HIDDEN])
        reverted = revert_mismatch(board, (0, 1, 2))
        self.assertEqual([c.state for c in reverted.cards], [HIDDEN, HIDDEN, MATCHED, HIDDEN])
        self.assertIs(revert_mismatch(reverted, (0, 1)), reverted)

    def test_given_board_when_querying_helpers_then_expected_values(self):
        board = _mk_board(['a', 'b', 'c', 'd', 'a', 'b', 'c', 'd', 'e', 'f', 'g', 'h', 'e', 'f', 'g', 'h'])
        self.assertTrue(board.contains(15))
        self.assertFalse(board.contains(16))
        txt = board.pretty()
        self.assertIn('[ 0]', txt)
        self.assertIn('[15]', txt)
        self.assertIn('A', board.pretty(reveal_all=True))


if __name__ == '__main__':
    unittest.main(verbosity=2)
