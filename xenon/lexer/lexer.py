"""
Xenon Lexer - turns source text into a list of tokens

Single pass over the input. Each iteration either emits one token, skips
whitespace or a comment, or raises a LexerError that ends the whole pass.

xwest
"""

import logging
from typing import List, Optional

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS
from .errors import (
    LexerError, create_unknown_symbol_error, create_unexpected_eof_error
)

logger = logging.getLogger(__name__)

# str.isspace() accepts the ASCII information separators; source text does not
NON_WHITESPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


class Lexer:
    """
    Xenon lexical analyzer.

    Converts source code text into a list of tokens. Lexing stops at the
    first malformed construct; no partial token list is ever returned.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens in source order

        Raises:
            LexerError: On the first unknown symbol or unterminated construct
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        tokens: List[Token] = []

        try:
            while self.pos < len(self.source):
                token = self._next_token()
                if token is not None:
                    tokens.append(token)
        except LexerError as e:
            logger.debug("Lexing %s failed: %s at %s", self.filename, e.error.name, e.location)
            raise

        logger.debug("Lexed %s: %d tokens over %d lines", self.filename, len(tokens), self.line)
        return tokens

    def _next_token(self) -> Optional[Token]:
        """Scan one construct at the cursor; returns None for skipped input."""
        current_char = self.source[self.pos]
        line = self.line

        # Identifiers and keywords
        if self._is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(line)

        # Numbers (integers and floats)
        if current_char.isdecimal():
            return self._tokenize_number(line)

        # String literals
        if current_char == '"':
            return self._tokenize_string(line)

        # Newlines and other whitespace (line tracking happens in _advance)
        if self._is_whitespace(current_char):
            self._advance()
            return None

        # Comments
        if current_char == '/' and self._peek() == '/':
            self._skip_line_comment()
            return None
        if current_char == '/' and self._peek() == '*':
            self._skip_block_comment()
            return None

        return self._tokenize_operator(line)

    def _tokenize_identifier_or_keyword(self, line: int) -> Token:
        """Tokenize an identifier, then resolve it against the keyword table."""
        start_pos = self.pos
        self._advance()

        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)

        return Token(token_type, line, lexeme)

    def _tokenize_number(self, line: int) -> Token:
        """Tokenize integer or float literals."""
        start_pos = self.pos
        self._advance()

        while self.pos < len(self.source) and (
                self.source[self.pos].isdecimal() or self.source[self.pos] == '.'):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        # No format validation here: "1.2.3" is still a float lexeme
        if '.' in lexeme:
            return Token(TokenType.FLOAT_LITERAL, line, lexeme)
        return Token(TokenType.INTEGER_LITERAL, line, lexeme)

    def _tokenize_string(self, line: int) -> Token:
        """Tokenize a string literal. There are no escape sequences."""
        self._advance()  # Skip opening quote
        start_pos = self.pos

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        if self.pos >= len(self.source):
            raise create_unexpected_eof_error(
                "string literal", 'quote (")', line, self._location()
            )

        value = self.source[start_pos:self.pos]
        self._advance()  # Skip closing quote

        return Token(TokenType.STRING_LITERAL, line, value)

    def _tokenize_operator(self, line: int) -> Token:
        """Resolve punctuation and operators, longest candidate first."""
        current_char = self.source[self.pos]

        for spelling, token_type in OPERATORS.get(current_char, ()):
            if self.source.startswith(spelling, self.pos):
                self._advance_by(len(spelling))
                return Token(token_type, line)

        raise create_unknown_symbol_error(current_char, self._location())

    def _skip_line_comment(self):
        """Skip a // comment up to, not including, the newline."""
        while self.pos < len(self.source) and self.source[self.pos] != '\n':
            self._advance()

    def _skip_block_comment(self):
        """Skip a /* */ comment; block comments do not nest."""
        opened_line = self.line
        self._advance_by(2)

        while self.pos < len(self.source):
            if self.source.startswith('*/', self.pos):
                self._advance_by(2)
                return
            self._advance()

        raise create_unexpected_eof_error(
            "block comment", "'*/'", opened_line, self._location()
        )

    def _is_identifier_start(self, char: str) -> bool:
        """Check if character can start an identifier."""
        return char.isalpha() or char == '_'

    def _is_identifier_continue(self, char: str) -> bool:
        """Check if character can continue an identifier."""
        return char.isalnum() or char == '_'

    def _is_whitespace(self, char: str) -> bool:
        """Check if character is whitespace."""
        return char.isspace() and char not in NON_WHITESPACE_SEPARATORS

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a source string.

    Each call uses a fresh Lexer, so calls are independent of each other.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Tokenize a UTF-8 source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    return tokenize(source, str(filepath))
