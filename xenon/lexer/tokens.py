"""
Token definitions for the Xenon lexer.

This module defines the closed set of token kinds the lexer can produce:
- Literals (integers, floats, strings, characters, identifiers)
- Keywords
- Punctuation
- Operators

It also holds the lookup tables the lexer resolves lexemes against.

Author: xwest
"""

from enum import IntEnum, auto
from dataclasses import dataclass
from typing import Dict, List, Tuple


class TokenType(IntEnum):
    """
    Enumeration of all token types in Xenon.

    Members are ordered by declaration, so token kinds sort deterministically.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    INTEGER_LITERAL = auto()        # 42
    FLOAT_LITERAL = auto()          # 3.14
    STRING_LITERAL = auto()         # "hello"
    CHAR_LITERAL = auto()           # reserved, not produced by the lexer
    IDENTIFIER = auto()             # main, _tmp, x1

    # ========================================================================
    # Keywords
    # ========================================================================
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    RETURN = auto()                 # return
    PUBLIC = auto()                 # public
    PRIVATE = auto()                # private
    MODULE = auto()                 # module
    FN = auto()                     # fn
    LET = auto()                    # let
    IF = auto()                     # if
    ELSE = auto()                   # else
    WHILE = auto()                  # while
    FOR = auto()                    # for
    LOOP = auto()                   # loop
    STRUCT = auto()                 # struct
    IMPLEMENT = auto()              # implement
    ENUM = auto()                   # enum
    UNSAFE = auto()                 # unsafe
    ASM = auto()                    # asm
    TRAIT = auto()                  # trait
    SWITCH = auto()                 # switch
    ASYNC = auto()                  # async
    BREAK = auto()                  # break
    CONTINUE = auto()               # continue

    # ========================================================================
    # Punctuation
    # ========================================================================
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )
    OPEN_BRACKET = auto()           # [
    CLOSE_BRACKET = auto()          # ]
    OPEN_CURLY = auto()             # {
    CLOSE_CURLY = auto()            # }
    SEMICOLON = auto()              # ;
    COMMA = auto()                  # ,
    DOT = auto()                    # .

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    STAR = auto()                   # *
    DIVIDE = auto()                 # /
    EQUALS = auto()                 # =
    EQUALS_EQUALS = auto()          # ==
    PLUS_EQUALS = auto()            # += (declared, never emitted)
    MINUS_EQUALS = auto()           # -= (declared, never emitted)
    TIMES_EQUALS = auto()           # *= (declared, never emitted)
    DIVIDE_EQUALS = auto()          # /= (declared, never emitted)
    GREATER = auto()                # >
    LESS = auto()                   # <
    GREATER_EQUAL = auto()          # >=
    LESS_EQUAL = auto()             # <=
    ARROW = auto()                  # ->
    COLON = auto()                  # :
    BANG = auto()                   # !
    SHEBANG = auto()                # #!
    AND = auto()                    # &&
    GET_REF = auto()                # & (declared, never emitted)
    OR = auto()                     # ||

    # ========================================================================
    # Sentinels
    # ========================================================================
    NONE = auto()                   # uninitialized, never carried by a Token
    UNKNOWN = auto()                # reserved


SENTINEL_TYPES = frozenset({TokenType.NONE, TokenType.UNKNOWN})

LITERAL_TYPES = frozenset({
    TokenType.INTEGER_LITERAL, TokenType.FLOAT_LITERAL,
    TokenType.STRING_LITERAL, TokenType.CHAR_LITERAL,
})

PUNCTUATION_TYPES = frozenset({
    TokenType.OPEN_PAREN, TokenType.CLOSE_PAREN,
    TokenType.OPEN_BRACKET, TokenType.CLOSE_BRACKET,
    TokenType.OPEN_CURLY, TokenType.CLOSE_CURLY,
    TokenType.SEMICOLON, TokenType.COMMA, TokenType.DOT,
})


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting; tokens themselves only carry a line.
    """
    filename: str
    line: int
    column: int
    offset: int  # Code point offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True, order=True)
class Token:
    """
    A lexical token in the Xenon language.

    The kind is required up front. ``value`` holds the lexeme for literals,
    identifiers and keywords and is empty for punctuation and operators.
    """
    kind: TokenType
    line: int
    value: str = ""

    def __post_init__(self):
        if not isinstance(self.kind, TokenType):
            raise TypeError(f"Token kind must be a TokenType, got {self.kind!r}")
        if self.kind in SENTINEL_TYPES:
            raise ValueError(f"{self.kind.name} is not a valid token kind")

    def __str__(self) -> str:
        if self.value:
            return f"{self.line} {self.kind.name} {self.value}"
        return f"{self.line} {self.kind.name}"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.line}, {self.value!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.kind in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.kind in OPERATOR_TYPES

    @property
    def is_punctuation(self) -> bool:
        return self.kind in PUNCTUATION_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.kind == TokenType.IDENTIFIER


# Lookup tables used by the lexer for keyword/operator recognition

# Reserved words, matched exactly and case-sensitively against a complete
# identifier lexeme
KEYWORDS: Dict[str, TokenType] = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "return": TokenType.RETURN,
    "public": TokenType.PUBLIC,
    "private": TokenType.PRIVATE,
    "module": TokenType.MODULE,
    "fn": TokenType.FN,
    "let": TokenType.LET,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "loop": TokenType.LOOP,
    "struct": TokenType.STRUCT,
    "implement": TokenType.IMPLEMENT,
    "enum": TokenType.ENUM,
    "unsafe": TokenType.UNSAFE,
    "asm": TokenType.ASM,
    "trait": TokenType.TRAIT,
    "switch": TokenType.SWITCH,
    "async": TokenType.ASYNC,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Leading character -> candidate (spelling, kind) pairs, longest first.
# A character with no candidate that matches is an unknown symbol, which is
# how a lone '&', '|' or '#' is rejected.
OPERATORS: Dict[str, List[Tuple[str, TokenType]]] = {
    # Punctuation
    "(": [("(", TokenType.OPEN_PAREN)],
    ")": [(")", TokenType.CLOSE_PAREN)],
    "[": [("[", TokenType.OPEN_BRACKET)],
    "]": [("]", TokenType.CLOSE_BRACKET)],
    "{": [("{", TokenType.OPEN_CURLY)],
    "}": [("}", TokenType.CLOSE_CURLY)],
    ";": [(";", TokenType.SEMICOLON)],
    ",": [(",", TokenType.COMMA)],
    ".": [(".", TokenType.DOT)],

    # Arithmetic
    "+": [("+", TokenType.PLUS)],
    "-": [("->", TokenType.ARROW), ("-", TokenType.MINUS)],
    "*": [("*", TokenType.STAR)],
    "/": [("/", TokenType.DIVIDE)],

    # Assignment and comparison
    "=": [("==", TokenType.EQUALS_EQUALS), ("=", TokenType.EQUALS)],
    "<": [("<=", TokenType.LESS_EQUAL), ("<", TokenType.LESS)],
    ">": [(">=", TokenType.GREATER_EQUAL), (">", TokenType.GREATER)],

    # Other
    ":": [(":", TokenType.COLON)],
    "!": [("!", TokenType.BANG)],
    "#": [("#!", TokenType.SHEBANG)],
    "&": [("&&", TokenType.AND)],
    "|": [("||", TokenType.OR)],
}

OPERATOR_TYPES = frozenset(
    kind
    for candidates in OPERATORS.values()
    for _, kind in candidates
    if kind not in PUNCTUATION_TYPES
) | frozenset({
    TokenType.PLUS_EQUALS, TokenType.MINUS_EQUALS,
    TokenType.TIMES_EQUALS, TokenType.DIVIDE_EQUALS,
    TokenType.GET_REF,
})
