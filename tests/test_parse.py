import unittest

from game import ConfigError, MAX_ROW, Player, parse_move, parse_player, parse_rows


class TestParsing(unittest.TestCase):
    def test_given_row_list_when_parsing_then_sizes_returned(self):
        self.assertEqual(parse_rows('1,3,5,7'), [1, 3, 5, 7])
        self.assertEqual(parse_rows(' 2, 4 ,6 '), [2, 4, 6])
        self.assertEqual(parse_rows(str(MAX_ROW)), [MAX_ROW])

    def test_given_bad_row_list_when_parsing_then_config_error_names_input(self):
        for text, offending in [('', ''), ('1,x,3', 'x'), ('1,,3', ''), ('0', '0'), ('-2', '-2'), ('256', '256')]:
            with self.assertRaises(ConfigError) as ctx:
                parse_rows(text)
            self.assertIn(repr(text), str(ctx.exception))
            self.assertIn(repr(offending), str(ctx.exception))
        self.assertTrue(issubclass(ConfigError, ValueError))

    def test_given_move_text_when_parsing_then_pair_or_none(self):
        self.assertEqual(parse_move('2,3'), (2, 3))
        self.assertEqual(parse_move(' 0 , 1 \n'), (0, 1))
        for bad in ['', 'x', '1', '1,2,3', 'a,b', '1;2']:
            self.assertIsNone(parse_move(bad), bad)

    def test_given_player_tokens_when_parsing_then_ai_is_case_insensitive(self):
        for token in ['ai', 'AI', 'Ai']:
            self.assertTrue(parse_player(token).is_computer)
        bob = parse_player('bob')
        self.assertFalse(bob.is_computer)
        self.assertEqual(str(bob), 'bob')
        self.assertEqual(str(Player.computer()), 'AI')
        self.assertEqual(Player.human('x'), parse_player('x'))


if __name__ == '__main__':
    unittest.main(verbosity=2)
