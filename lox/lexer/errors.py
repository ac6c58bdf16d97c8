"""
Error handling for the Lox scanner.

Lexical errors never abort a scan. Inside the scanner a malformed token
raises LexerError, the scan loop catches it and hands it to an
ErrorReporter, which is the diagnostic sink owned by the driver.

Author: xwest
"""

import sys
from typing import Optional, List, TextIO
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A line-tagged error report."""
    line: int
    where: str      # location qualifier, empty for scanner errors
    message: str
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class LexerError(Exception):
    """
    Raised inside the scanner when the current token is malformed.

    Caught by the scan loop; it is never propagated to callers of
    Scanner.scan_tokens().
    """

    def __init__(self, message: str, line: int, code: Optional[str] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            line=line,
            where="",
            message=message,
            code=code
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorReporter:
    """
    Diagnostic sink for lexical errors.

    Every report is recorded, printed to the error stream and sets
    ``had_error``. A reporter belongs to one run; the driver makes a new
    one (or calls reset()) before scanning the next buffer.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.diagnostics: List[Diagnostic] = []
        self.had_error = False

    def error(self, line: int, message: str):
        self.report(line, "", message)

    def report(self, line: int, where: str, message: str, code: Optional[str] = None):
        """Record a diagnostic and render it to the error stream."""
        diagnostic = Diagnostic(line=line, where=where, message=message, code=code)
        self.diagnostics.append(diagnostic)
        self.had_error = True
        print(diagnostic, file=self.stream if self.stream is not None else sys.stderr)

    def report_error(self, error: LexerError):
        diag = error.diagnostic
        self.report(diag.line, diag.where, diag.message, diag.code)

    def reset(self):
        self.diagnostics.clear()
        self.had_error = False


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


# Helper functions for creating the scanner's errors
def create_unexpected_character_error(line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    return LexerError("Unexpected character.", line, code="L001")


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal missing its closing quote."""
    return LexerError("Unterminated string.", line, code="L002")
