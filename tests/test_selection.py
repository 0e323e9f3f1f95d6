import unittest

from game import GameState, SelectionController, SelectionEvent as E


def make_state(rows):
    s = GameState([max(r, 1) for r in rows])
    s.rows = list(rows)
    return s


class TestSelectionController(unittest.TestCase):
    def test_given_opening_when_starting_turn_then_first_row_count_one(self):
        c = SelectionController(GameState([1, 3, 5, 7]))
        self.assertEqual(c.candidate, (0, 1))

    def test_given_leading_empty_rows_when_starting_turn_then_first_nonempty_row(self):
        c = SelectionController(make_state([0, 0, 2, 1]))
        self.assertEqual(c.candidate, (2, 1))

    def test_given_empty_board_when_starting_turn_then_value_error(self):
        with self.assertRaises(ValueError):
            SelectionController(make_state([0, 0]))

    def test_given_first_row_when_moving_up_then_wraps_to_last_nonempty_row(self):
        c = SelectionController(GameState([1, 3, 5, 7]))
        c.handle(E.PREV_ROW)
        self.assertEqual(c.candidate, (3, 1))
        c2 = SelectionController(make_state([1, 3, 5, 0]))
        c2.handle(E.PREV_ROW)
        self.assertEqual(c2.candidate, (2, 1))

    def test_given_last_row_when_moving_down_then_wraps_and_skips_empty_rows(self):
        c = SelectionController(make_state([0, 3, 0, 7]))
        c.handle(E.NEXT_ROW)
        self.assertEqual(c.row, 3)
        c.handle(E.NEXT_ROW)
        self.assertEqual(c.row, 1)

    def test_given_row_when_increasing_then_clamped_to_row_size(self):
        c = SelectionController(GameState([1, 3, 5, 7]))
        self.assertFalse(c.handle(E.INCREASE))
        self.assertEqual(c.count, 1)
        c.handle(E.NEXT_ROW)
        for _ in range(5):
            c.handle(E.INCREASE)
        self.assertEqual(c.candidate, (1, 3))

    def test_given_count_one_when_decreasing_then_stays_one(self):
        c = SelectionController(GameState([1, 3, 5, 7]))
        c.handle(E.NEXT_ROW)
        c.handle(E.INCREASE)
        c.handle(E.DECREASE)
        c.handle(E.DECREASE)
        self.assertEqual(c.candidate, (1, 1))

    def test_given_larger_count_when_changing_row_then_count_resets(self):
        c = SelectionController(GameState([1, 3, 5, 7]))
        c.handle(E.PREV_ROW)
        c.handle(E.INCREASE)
        c.handle(E.INCREASE)
        self.assertEqual(c.candidate, (3, 3))
        c.handle(E.PREV_ROW)
        self.assertEqual(c.candidate, (2, 1))

    def test_given_events_when_running_then_confirm_commits_candidate(self):
        state = GameState([1, 3, 5, 7])
        c = SelectionController(state)
        move = c.run([E.NEXT_ROW, None, E.NEXT_ROW, E.INCREASE, E.INCREASE, E.CONFIRM, E.NEXT_ROW])
        self.assertEqual(move, (2, 3))
        self.assertEqual(c.committed, (2, 3))
        self.assertFalse(c.cancelled)
        self.assertEqual(state.rows, [1, 3, 5, 7])

    def test_given_cancel_when_running_then_no_move(self):
        c = SelectionController(GameState([1, 3, 5, 7]))
        self.assertIsNone(c.run([E.INCREASE, E.CANCEL, E.CONFIRM]))
        self.assertTrue(c.cancelled)
        self.assertFalse(c.handle(E.NEXT_ROW))

    def test_given_events_run_out_when_running_then_treated_as_cancel(self):
        c = SelectionController(GameState([1, 3, 5, 7]))
        self.assertIsNone(c.run([E.NEXT_ROW]))
        self.assertTrue(c.cancelled)

    def test_given_listener_when_state_changes_then_notified_only_on_change(self):
        seen = []
        c = SelectionController(GameState([1, 3, 5, 7]), on_change=lambda ctl: seen.append(ctl.candidate))
        c.handle(E.INCREASE)   # clamped, no change
        c.handle(E.DECREASE)   # clamped, no change
        c.handle(E.NEXT_ROW)
        c.handle(E.INCREASE)
        c.handle(E.CONFIRM)
        self.assertEqual(seen, [(1, 1), (1, 2)])

    def test_given_single_nonempty_row_when_moving_rows_then_stays_and_resets(self):
        c = SelectionController(make_state([0, 4, 0]))
        c.handle(E.INCREASE)
        c.handle(E.NEXT_ROW)
        self.assertEqual(c.candidate, (1, 1))
        c.handle(E.PREV_ROW)
        self.assertEqual(c.candidate, (1, 1))


if __name__ == '__main__':
    unittest.main(verbosity=2)
