#!/usr/bin/env python3
"""
Command line driver for Lox.

Runs a script file, or reads source one line at a time from an
interactive prompt. For now each run just prints the scanned tokens,
one per line. Lexical errors go to stderr and, for scripts, turn into
a non-zero exit status.

Usage:
    lox                 # interactive prompt
    lox script.lox      # run a file
"""

import argparse
import io
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from .lexer import Scanner, Token, Diagnostic, ErrorReporter


# sysexits.h codes
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "


@dataclass
class RunResult:
    """Outcome of running one source buffer."""
    tokens: List[Token] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return len(self.diagnostics) > 0


class Lox:
    """
    Runs Lox source from a file or an interactive prompt.

    Error state is never shared between runs: each call to run() gets a
    fresh ErrorReporter and returns its own RunResult.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def run(self, source: str) -> RunResult:
        """Scan ``source`` and print its tokens."""
        reporter = ErrorReporter(self.stderr)
        tokens = Scanner(source, reporter).scan_tokens()

        for token in tokens:
            print(token, file=self.stdout)

        return RunResult(tokens=tokens, diagnostics=list(reporter.diagnostics))

    def run_file(self, path: str) -> int:
        """
        Read an entire script and run it.

        Returns:
            Process exit status
        """
        try:
            # Undecodable bytes become U+FFFD, like the original reader
            with open(path, 'r', errors='replace') as f:
                source = f.read()
        except OSError as e:
            print(f"Could not read {path}: {e.strerror or e}", file=self.stderr)
            return EX_NOINPUT

        result = self.run(source)
        if result.had_error:
            return EX_DATAERR
        return EX_OK

    def run_prompt(self, stdin: Optional[TextIO] = None) -> int:
        """Read-scan-print loop until end of input."""
        stdin = stdin if stdin is not None else sys.stdin
        if isinstance(stdin, io.TextIOWrapper):
            stdin.reconfigure(errors="replace")

        while True:
            print(PROMPT, end="", file=self.stdout, flush=True)
            line = stdin.readline()
            if not line:
                print(file=self.stdout)
                break
            self.run(line.rstrip("\r\n"))

        return EX_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lox command"""

    parser = argparse.ArgumentParser(
        prog="lox",
        description="Lox interpreter (scanner stage)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox                  # Start the interactive prompt
    lox hello.lox        # Scan a script and print its tokens
        """
    )
    parser.add_argument('script', nargs='*',
                        help='Path to a Lox script (omit for the prompt)')

    args = parser.parse_args(argv)

    lox = Lox()

    if len(args.script) > 1:
        print("Usage: lox [script]", file=lox.stdout)
        return EX_USAGE
    elif len(args.script) == 1:
        return lox.run_file(args.script[0])
    else:
        return lox.run_prompt()


if __name__ == "__main__":
    sys.exit(main())
