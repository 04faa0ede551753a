"""
Xenon Language Front End

Lexical analysis for the Xenon programming language. The lexer turns source
text into the token list a parser consumes.

Architecture:
    xenon/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Token dump tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, LexerError, Token, TokenType, tokenize

__all__ = [
    # Core API
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "tokenize",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
