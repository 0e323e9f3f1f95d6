import random
import unittest

from game import (
    GameState,
    Player,
    SelectionController,
    SelectionEvent,
    TurnLoop,
    auto_move,
    nim_sum,
    parse_rows,
    xor_move,
)


class TestNimBasics(unittest.TestCase):
    def test_nim_sum_of_opening_is_zero(self):
        self.assertEqual(nim_sum(parse_rows('1,3,5,7')), 0)

    def test_computer_opening_is_single_take(self):
        state = GameState([1, 3, 5, 7])
        self.assertIsNone(xor_move(state))
        row, count = auto_move(state, random.Random(0))
        self.assertEqual(count, 1)
        self.assertGreater(state.rows[row], 0)

    def test_endgame_scenario_leaves_one_object(self):
        state = GameState([1, 3, 5, 7])
        state.rows = [0, 0, 3, 0]
        move = auto_move(state)
        self.assertEqual(move, (2, 2))
        self.assertTrue(state.apply_move(*move))
        self.assertTrue(state.check_lose())

    def test_cursor_driven_human_against_computer(self):
        def human(state, player, last_move):
            controller = SelectionController(state)
            # Take the whole first non-empty row.
            events = [SelectionEvent.INCREASE] * state.rows[controller.row] + [SelectionEvent.CONFIRM]
            return controller.run(events)

        state = GameState([1, 3, 5, 7])
        players = [Player.human('human'), Player.computer()]
        result = TurnLoop(state, players, ask_human=human, rng=random.Random(1)).run()
        self.assertIsNotNone(result.winner)
        self.assertFalse(result.aborted)
        self.assertEqual(str(result.winner), 'AI')


if __name__ == '__main__':
    unittest.main(verbosity=2)
