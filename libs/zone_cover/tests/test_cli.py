import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from zone_cover import session_log as slog
from zone_cover.cli import main

OBJECTS = {'Objects': [
    {'name': 'Land_A', 'pos': [0.0, 12.0, 0.0]},
    {'name': 'Land_B', 'pos': [1.0, 15.0, 0.0]},
    {'name': 'Land_C', 'pos': [100.0, 9.0, 100.0]},
]}


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)
        self.input = self.dir / 'objects.json'
        self.input.write_text(json.dumps(OBJECTS))

    def tearDown(self):
        slog.config(slog.Profile(slog.Profile.MODE_STD))
        self.tmp.cleanup()

    def run_cli(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            status = main(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_emits_statements(self):
        status, out, err = self.run_cli('-i', str(self.input), '-r', '5', '-t', 'Town', '-s', '42')
        self.assertEqual(status, 0)
        self.assertEqual(out, (
            "insert into dayz_zones (ztype, zcoordsx, zcoordsy, zradius, sid)\n"
            "values ('Town', 0, 0, 5, 42);\n"
            "insert into dayz_zones (ztype, zcoordsx, zcoordsy, zradius, sid)\n"
            "values ('Town', 100, 100, 5, 42);\n"))
        self.assertIn('3 points', err)
        self.assertIn('2 circles', err)

    def test_methods_match(self):
        outputs = []
        for method in ('scan', 'kdtree'):
            status, out, _ = self.run_cli('--input', str(self.input), '--radius', '0.5',
                                          '--type', 'Town', '--sid', '1', '--method', method)
            self.assertEqual(status, 0)
            outputs.append(out)
        self.assertEqual(outputs[0], outputs[1])
        self.assertEqual(outputs[0].count('insert into'), 3)

    def test_profile_and_table(self):
        status, out, err = self.run_cli('-i', str(self.input), '-r', '500', '-t', 'Town',
                                        '-s', '1', '--table', 'zones', '--profile')
        self.assertEqual(status, 0)
        self.assertEqual(out.count('insert into zones'), 1)
        self.assertIn('=== Session [dzzones] profile ===', err)
        self.assertIn('load -> cover:', err)

    def test_missing_file(self):
        status, out, err = self.run_cli('-i', str(self.dir / 'missing.json'), '-r', '5',
                                        '-t', 'Town', '-s', '1')
        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertIn('Error reading input file', err)

    def test_directory_input(self):
        status, out, err = self.run_cli('-i', str(self.dir), '-r', '5', '-t', 'Town', '-s', '1')
        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertIn('Error reading input file', err)

    def test_non_utf8_input(self):
        self.input.write_bytes(b'{"Objects": [\xff]}')
        status, out, err = self.run_cli('-i', str(self.input), '-r', '5', '-t', 'Town', '-s', '1')
        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertIn('Error reading input file', err)

    def test_bad_object(self):
        self.input.write_text(json.dumps({'Objects': [{'name': 'Broken', 'pos': [1]}]}))
        status, out, err = self.run_cli('-i', str(self.input), '-r', '5', '-t', 'Town', '-s', '1')
        self.assertEqual(status, 1)
        self.assertIn('Broken', err)

    def test_empty_type(self):
        status, out, err = self.run_cli('-i', str(self.input), '-r', '5', '-t', '', '-s', '1')
        self.assertEqual(status, 1)
        self.assertEqual(out, '')

    def test_argument_errors(self):
        for argv in [['-r', '5', '-t', 'Town', '-s', '1'],
                     ['-i', str(self.input), '-t', 'Town', '-s', '1'],
                     ['-i', str(self.input), '--radius=-1', '-t', 'Town', '-s', '1'],
                     ['-i', str(self.input), '--radius=0', '-t', 'Town', '-s', '1'],
                     ['-i', str(self.input), '-r', 'abc', '-t', 'Town', '-s', '1'],
                     ['-i', str(self.input), '-r', '5', '-t', 'Town']]:
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli(*argv)
            self.assertEqual(ctx.exception.code, 2)

    def test_plot(self):
        png = self.dir / 'cover.png'
        status, _, _ = self.run_cli('-i', str(self.input), '-r', '5', '-t', 'Town',
                                    '-s', '1', '--plot', str(png))
        self.assertEqual(status, 0)
        self.assertTrue(png.exists())
        self.assertGreater(png.stat().st_size, 0)


if __name__ == '__main__':
    unittest.main()
