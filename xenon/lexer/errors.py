"""
Error handling for the Xenon lexer.

Lexing is all-or-nothing: the first malformed construct aborts the pass with
a single LexerError carrying the error kind, the location of the failure and
a renderable diagnostic.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, OPERATORS


class LexError(Enum):
    """Closed set of lexer failure kinds."""
    UNKNOWN_SYMBOL = "unknown symbol"
    UNEXPECTED_EOF = "unexpected end of input"
    UNKNOWN = "unknown"  # default, never raised by the lexer

    def __str__(self) -> str:
        return f"LexError: {self.name}"


@dataclass
class Diagnostic:
    """A user-facing lexer diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters malformed input.

    ``error`` is the LexError kind and ``location`` the point of failure.
    """

    def __init__(
        self,
        error: LexError,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.error = error
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unknown symbol",
    "L002": "Unexpected end of input",
}


def suggest_operator_corrections(char: str) -> List[str]:
    """Suggest the operators that begin with an unmatched leading character."""
    return [spelling for spelling, _ in OPERATORS.get(char, []) if len(spelling) > 1]


def create_unknown_symbol_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no token."""
    suggestions = suggest_operator_corrections(char)

    if suggestions:
        help_text = f"'{char}' is only valid as part of {', '.join(repr(s) for s in suggestions)}."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Xenon source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        LexError.UNKNOWN_SYMBOL,
        message=f"Unknown symbol '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None
    )


def create_unexpected_eof_error(construct: str, closer: str, opened_line: int,
                                location: SourceLocation) -> LexerError:
    """Create an error for a construct still open at end of input."""
    return LexerError(
        LexError.UNEXPECTED_EOF,
        message=f"Unexpected end of input in {construct}",
        location=location,
        code="L002",
        help_text=f"The {construct} opened on line {opened_line} is never closed.",
        suggestions=[f"Add a closing {closer}"]
    )
