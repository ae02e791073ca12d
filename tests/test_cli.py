import io
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from toruslife import cli
from toruslife.patterns import PATTERNS, centered, get_pattern, pattern_size


class TestPatterns(unittest.TestCase):
    def test_given_glider_when_placed_then_five_offset_cells(self):
        self.assertEqual(get_pattern('glider'), [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)])
        self.assertEqual(get_pattern('blinker', (3, 4)), [(3, 4), (4, 4), (5, 4)])

    def test_given_unknown_name_when_getting_pattern_then_key_error(self):
        with self.assertRaises(KeyError):
            get_pattern('nope')

    def test_given_board_when_centering_then_pattern_in_middle(self):
        self.assertEqual(pattern_size('block'), (2, 2))
        self.assertEqual(centered('block', 6, 4), [(2, 1), (3, 1), (2, 2), (3, 2)])

    def test_given_all_patterns_when_drawn_then_rows_only_use_known_marks(self):
        for name, rows in PATTERNS.items():
            for row in rows:
                self.assertTrue(set(row) <= {'#', '.'}, name)
            self.assertGreater(len(get_pattern(name)), 0)


class TestCli(unittest.TestCase):
    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            cli.main(argv)
        return out.getvalue()

    def test_given_blinker_when_running_two_generations_then_three_pictures(self):
        text = self._run(['--width', '5', '--height', '5', '--pattern', 'blinker', '-n', '2'])
        self.assertIn('Generation 0 (population 3):', text)
        self.assertIn('Generation 2 (population 3):', text)
        self.assertNotIn('Generation 3', text)
        self.assertIn('. # # # .', text)

    def test_given_dying_board_when_until_gameover_then_stops_early(self):
        # a full row on a 3x3 torus fills the board, which then starves
        for extra in ([], ['--flat']):
            text = self._run(['--width', '3', '--height', '3', '--pattern', 'blinker', '--at', '0,0',
                              '--generations', '50', '--until-gameover'] + extra)
            self.assertIn('Generation 0 (population 3):', text)
            self.assertIn('Generation 1 (population 9):', text)
            self.assertIn('Generation 2 (population 0):', text)
            self.assertIn('All cells are dead.', text)
            self.assertNotIn('Generation 3', text)

    def test_given_flat_flag_when_running_then_same_output_as_zipper(self):
        argv = ['--width', '7', '--height', '6', '--random', '0.4', '--seed', '11', '-n', '4']
        self.assertEqual(self._run(argv), self._run(argv + ['--flat']))

    def test_given_env_size_when_no_flags_then_env_defaults_used(self):
        with patch.dict(os.environ, {'TORUSLIFE_WIDTH': '3', 'TORUSLIFE_HEIGHT': '2'}):
            text = self._run(['-n', '0'])
        self.assertEqual(text, 'Generation 0 (population 0):\n. . .\n. . .\n')

    def test_given_debug_env_when_running_then_trace_printed(self):
        with patch.dict(os.environ, {'TORUSLIFE_DEBUG': '1'}):
            text = self._run(['--width', '3', '--height', '3', '-n', '0'])
        self.assertIn('[life] 3x3 board', text)

    def test_given_bad_arguments_when_parsing_then_exit(self):
        with redirect_stdout(io.StringIO()), patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.main(['--width', '0'])
            with self.assertRaises(SystemExit):
                cli.main(['--pattern', 'block', '--at', 'nowhere'])
            with self.assertRaises(SystemExit):
                cli.main(['--random', '2'])


if __name__ == '__main__':
    unittest.main(verbosity=2)
