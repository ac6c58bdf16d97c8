"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.
Turns source text into an ordered list of tokens for the later stages of
the interpreter.

Key Features:
- Single pass with one character of lookahead (maximal munch for `!=`, `<=`, ...)
- String literals spanning multiple lines
- Integer and fractional number literals, realized as floats
- Reserved word recognition through a static keyword table
- Per-character error recovery with line-tagged diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS, LiteralValue
from .scanner import Scanner, scan, scan_file
from .errors import Diagnostic, ErrorReporter, LexerError

__all__ = [
    "Scanner",
    "scan",
    "scan_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "LiteralValue",
    "Diagnostic",
    "ErrorReporter",
    "LexerError",
]
