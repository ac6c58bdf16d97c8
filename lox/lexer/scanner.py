"""
Lox Scanner - turns source text into tokens

Single left-to-right pass with one character of lookahead (two when
checking for the fractional part of a number). Bad input never stops
the scan: each error is reported and we carry on with the next
character, so the caller always gets a token list ending in EOF.

xwest
"""

from typing import List, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)
from .errors import (
    LexerError, ErrorReporter, create_unexpected_character_error,
    create_unterminated_string_error
)


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits like '²'
    return '0' <= char <= '9'


def _is_alpha(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Converts a complete source buffer into a list of tokens. Lexical
    errors are collected in ``errors`` and forwarded to the reporter,
    if one was given.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text (a file, or one REPL line)
            reporter: Diagnostic sink that receives lexical errors
        """
        self.source = source
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Every call starts over from the beginning of the source.

        Returns:
            List of tokens, always terminated by exactly one EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start = self.current
            try:
                self._scan_token()
            except LexerError as e:
                # The offending input is already consumed, so just move on
                self.errors.append(e)
                if self.reporter is not None:
                    self.reporter.report_error(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _scan_token(self):
        """Consume one lexeme starting at self.start."""
        char = self._advance()

        if char in ' \r\t':
            return

        if char == '\n':
            self.line += 1
            return

        if char == '/':
            if self._match('/'):
                # Comment runs to end of line; leave the newline for the loop
                while self._peek() != '\n' and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
            return

        if char in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[char]
            self._add_token(double if self._match('=') else single)
            return

        if char == '"':
            self._string()
            return

        if _is_digit(char):
            self._number()
            return

        if _is_alpha(char):
            self._identifier()
            return

        raise create_unexpected_character_error(self.line)

    def _string(self):
        """Scan a string literal. Strings may span lines; no escapes."""
        start_line = self.line

        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == '\n':
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(start_line)

        self._advance()  # closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _number(self):
        """Scan a number literal: digits, optionally '.' and more digits."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' is only part of the number if a digit follows it
        if self._peek() == '.' and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        lexeme = self.source[self.start:self.current]
        self._add_token(TokenType.NUMBER, float(lexeme))

    def _identifier(self):
        """Scan an identifier or reserved word."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        lexeme = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(lexeme, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal=None, line: Optional[int] = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(
            token_type,
            lexeme,
            literal,
            self.line if line is None else line
        ))

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        """Peek at the current character without consuming it."""
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def has_errors(self) -> bool:
        """Check if the last scan encountered any errors."""
        return len(self.errors) > 0


def scan(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Lexical errors go to ``reporter``; they are never raised.

    Args:
        source: Source code string
        reporter: Optional diagnostic sink

    Returns:
        List of tokens ending in EOF
    """
    return Scanner(source, reporter).scan_tokens()


def scan_file(filepath: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to scan a source file.

    The file is decoded with the platform default encoding; bytes that
    do not decode are replaced with U+FFFD.

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', errors='replace') as f:
        source = f.read()

    return scan(source, reporter)
