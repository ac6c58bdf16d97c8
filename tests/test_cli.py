"""
Tests for the lox command line driver.

Tests cover:
- Running a script file and its exit status
- The interactive prompt
- Argument handling

Author: xwest
"""

import io
import unittest
import tempfile
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.cli import Lox, RunResult, main, EX_OK, EX_USAGE, EX_DATAERR, EX_NOINPUT
from lox.lexer import TokenType


class TestLoxRun(unittest.TestCase):
    """Test cases for Lox.run and Lox.run_file."""

    def setUp(self):
        """Set up test fixtures."""
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.lox = Lox(stdout=self.stdout, stderr=self.stderr)
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write_script(self, source: str) -> str:
        path = os.path.join(self.tmpdir.name, "script.lox")
        with open(path, 'w') as f:
            f.write(source)
        return path

    def test_run_prints_tokens(self):
        """Each token is printed on its own line."""
        result = self.lox.run("print 1;")
        self.assertIsInstance(result, RunResult)
        self.assertFalse(result.had_error)
        self.assertEqual(
            self.stdout.getvalue().splitlines(),
            ["PRINT print None", "NUMBER 1 1.0", "SEMICOLON ; None", "EOF  None"]
        )
        self.assertEqual(self.stderr.getvalue(), "")

    def test_run_reports_errors(self):
        result = self.lox.run("a @ b")
        self.assertTrue(result.had_error)
        self.assertEqual([t.type for t in result.tokens],
                         [TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.EOF])
        self.assertEqual(self.stderr.getvalue(), "[line 1] Error: Unexpected character.\n")

    def test_runs_do_not_share_error_state(self):
        self.assertTrue(self.lox.run('"open').had_error)
        second = self.lox.run("ok")
        self.assertFalse(second.had_error)
        self.assertEqual(second.diagnostics, [])

    def test_run_file_clean(self):
        path = self._write_script("var x = 10;\nprint x;\n")
        self.assertEqual(self.lox.run_file(path), EX_OK)
        self.assertIn("VAR var None", self.stdout.getvalue())

    def test_run_file_with_lexical_error(self):
        """Scripts with lexical errors still print tokens but exit 65."""
        path = self._write_script("var x = 1;\nvar y = @;\n")
        self.assertEqual(self.lox.run_file(path), EX_DATAERR)
        self.assertIn("IDENTIFIER y None", self.stdout.getvalue())
        self.assertEqual(self.stderr.getvalue(), "[line 2] Error: Unexpected character.\n")

    def test_run_file_missing(self):
        path = os.path.join(self.tmpdir.name, "missing.lox")
        self.assertEqual(self.lox.run_file(path), EX_NOINPUT)
        self.assertIn("Could not read", self.stderr.getvalue())
        self.assertEqual(self.stdout.getvalue(), "")

    def test_run_file_with_undecodable_bytes(self):
        """Badly encoded bytes are replaced instead of crashing the run."""
        path = os.path.join(self.tmpdir.name, "latin1.lox")
        with open(path, 'wb') as f:
            f.write(b'var x = "caf\xe9";\n')

        self.assertEqual(self.lox.run_file(path), EX_OK)
        self.assertIn("SEMICOLON ; None", self.stdout.getvalue())
        self.assertEqual(self.stderr.getvalue(), "")


class TestLoxPrompt(unittest.TestCase):
    """Test cases for the interactive prompt."""

    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.lox = Lox(stdout=self.stdout, stderr=self.stderr)

    def test_prompt_scans_each_line(self):
        stdin = io.StringIO("1\nfoo\n")
        self.assertEqual(self.lox.run_prompt(stdin), EX_OK)
        output = self.stdout.getvalue()
        self.assertEqual(output.count("> "), 3)
        self.assertIn("NUMBER 1 1.0", output)
        self.assertIn("IDENTIFIER foo None", output)

    def test_each_line_starts_at_line_one(self):
        stdin = io.StringIO("@\n@\n")
        self.lox.run_prompt(stdin)
        self.assertEqual(
            self.stderr.getvalue().splitlines(),
            ["[line 1] Error: Unexpected character.",
             "[line 1] Error: Unexpected character."]
        )

    def test_error_does_not_stop_prompt(self):
        stdin = io.StringIO('"unterminated\nok\n')
        self.assertEqual(self.lox.run_prompt(stdin), EX_OK)
        self.assertIn("IDENTIFIER ok None", self.stdout.getvalue())
        self.assertEqual(len(self.stderr.getvalue().splitlines()), 1)

    def test_empty_input(self):
        self.assertEqual(self.lox.run_prompt(io.StringIO("")), EX_OK)
        self.assertEqual(self.stdout.getvalue(), "> \n")

    def test_prompt_with_undecodable_bytes(self):
        stdin = io.TextIOWrapper(io.BytesIO(b'"caf\xe9"\nok\n'), encoding="utf-8")
        self.assertEqual(self.lox.run_prompt(stdin), EX_OK)
        output = self.stdout.getvalue()
        self.assertIn('STRING "caf\ufffd" caf\ufffd', output)
        self.assertIn("IDENTIFIER ok None", output)
        self.assertEqual(self.stderr.getvalue(), "")


class TestMain(unittest.TestCase):
    """Test cases for argument handling in main()."""

    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self._saved = (sys.stdout, sys.stderr, sys.stdin)
        sys.stdout, sys.stderr = self.stdout, self.stderr

    def tearDown(self):
        sys.stdout, sys.stderr, sys.stdin = self._saved

    def test_too_many_arguments(self):
        self.assertEqual(main(["a.lox", "b.lox"]), EX_USAGE)
        self.assertEqual(self.stdout.getvalue(), "Usage: lox [script]\n")

    def test_script_argument(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "hello.lox")
            with open(path, 'w') as f:
                f.write('print "hello";')
            self.assertEqual(main([path]), EX_OK)
        self.assertIn('STRING "hello" hello', self.stdout.getvalue())

    def test_script_with_errors(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bad.lox")
            with open(path, 'w') as f:
                f.write('print "hello;')
            self.assertEqual(main([path]), EX_DATAERR)
        self.assertIn("Unterminated string.", self.stderr.getvalue())

    def test_no_arguments_starts_prompt(self):
        sys.stdin = io.StringIO("and\n")
        self.assertEqual(main([]), EX_OK)
        self.assertIn("AND and None", self.stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
