"""Tests for the command entry point."""
import unittest
import io
import os
import json
import tempfile
import shutil
from unittest.mock import patch
from textprogress.main import main, simulate, DEMO_SCENARIOS
from textprogress.progress import create
from tests.helpers import FakeClock, visible

class TestMain(unittest.TestCase):
    def setUp(self):
        """Set up test environment."""
        self.test_dir = tempfile.mkdtemp()
        self.old_cwd = os.getcwd()
        os.chdir(self.test_dir)

    def tearDown(self):
        """Clean up test environment."""
        os.chdir(self.old_cwd)
        shutil.rmtree(self.test_dir)

    def test_run(self):
        """Test the run command end to end."""
        with patch('sys.stdout', new_callable=io.StringIO) as mock_stdout:
            status = main(['run', '25', '--delay', '0', '--actual-num'])
        self.assertEqual(status, 0)
        self.assertEqual(
            visible(mock_stdout.getvalue()),
            'Running: [' + '=' * 20 + '] Done. [0 seconds]\n'
        )

    def test_run_uses_config_file(self):
        """Test that the config file sets display options."""
        with open('textprogress.config.json', 'w') as f:
            json.dump({'startMessage': 'Working ', 'showFinalTime': False}, f)
        with patch('sys.stdout', new_callable=io.StringIO) as mock_stdout:
            main(['run', '5', '--delay', '0'])
        self.assertTrue(mock_stdout.getvalue().startswith('Working ['))
        self.assertTrue(mock_stdout.getvalue().endswith(' Done.\n'))

    def test_invalid_option_exit_status(self):
        """Test that invalid options are reported with status 2."""
        with patch('sys.stdout', new_callable=io.StringIO) as mock_stdout:
            with self.assertLogs(level='ERROR') as logs:
                status = main(['run', '10', '--delay', '0', '--bar-symbol', 'ab'])
        self.assertEqual(status, 2)
        self.assertIn('bar_symbol', logs.output[0])
        self.assertEqual(mock_stdout.getvalue(), '')

    @patch('textprogress.main.time.sleep')
    def test_simulate_sleeps_per_step(self, mock_sleep):
        """Test that simulate waits once per step."""
        with patch('sys.stdout', new_callable=io.StringIO):
            simulate(12, 0.01, {})
        self.assertEqual(mock_sleep.call_count, 12)

    @patch('textprogress.main.time.sleep')
    def test_demo(self, mock_sleep):
        """Test that the demo runs every scenario."""
        with patch('sys.stdout', new_callable=io.StringIO) as mock_stdout:
            status = main(['demo'])
        output = mock_stdout.getvalue()
        self.assertEqual(status, 0)
        self.assertEqual(mock_sleep.call_count, sum(total for _, total, _ in DEMO_SCENARIOS))
        self.assertIn('Example 3: We can even hide the progress bar', output)
        self.assertIn('Waiting... [', output)
        self.assertIn(' Finally!', output)
        self.assertEqual(output.count(' seconds]\n'), 3)

    def test_customized_scenario_final_line(self):
        """Test that the customized demo scenario ends on a clean line."""
        _, total, options = DEMO_SCENARIOS[1]
        stream = io.StringIO()
        clock = FakeClock()
        progress = create(total, stream=stream, clock=clock, **options)
        for i in range(1, total + 1):
            clock.now = i * 0.05
            progress.advance(i)
        self.assertEqual(
            visible(stream.getvalue()),
            'Waiting... [' + '+' * 20 + '] Finally! [8 seconds]\n'
        )

    @patch('textprogress.main.time.sleep')
    def test_negative_delay_exit_status(self, mock_sleep):
        """Test that a negative delay is rejected before anything runs."""
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                main(['run', '5', '--delay', '-0.5'])
        self.assertEqual(cm.exception.code, 2)
        mock_sleep.assert_not_called()

if __name__ == '__main__':
    unittest.main()
