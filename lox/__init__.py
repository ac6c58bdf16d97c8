"""
Lox Interpreter Package

Front end of a tree-walk interpreter for the Lox scripting language.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Script runner and interactive prompt

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, ErrorReporter

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "ErrorReporter",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
