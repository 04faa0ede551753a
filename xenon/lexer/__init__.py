"""
Xenon Lexer Package

Implements the lexical analyzer (tokenizer) for the Xenon language.

Key Features:
- Exact-match keyword table
- Maximal munch operators with one character of lookahead
- Line and block comments
- Line tracking for diagnostics
- All-or-nothing error model: the first error aborts the pass

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS
from .lexer import Lexer, tokenize, tokenize_file
from .errors import LexError, LexerError, Diagnostic

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "OPERATORS",
    "LexError",
    "LexerError",
    "Diagnostic",
]
