"""
Tests for the Xenon token model and lookup tables.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from xenon.lexer.tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS


class TestToken(unittest.TestCase):
    """Token construction, comparison and rendering."""

    def test_kind_required(self):
        with self.assertRaises(TypeError):
            Token()  # type: ignore[call-arg]

    def test_sentinel_kinds_rejected(self):
        for kind in (TokenType.NONE, TokenType.UNKNOWN):
            with self.subTest(kind=kind):
                with self.assertRaises(ValueError):
                    Token(kind, 1)

    def test_non_token_type_rejected(self):
        with self.assertRaises(TypeError):
            Token("IDENTIFIER", 1, "x")  # type: ignore[arg-type]

    def test_immutable(self):
        token = Token(TokenType.IDENTIFIER, 1, "x")
        with self.assertRaises(AttributeError):
            token.value = "y"  # type: ignore[misc]

    def test_equality(self):
        self.assertEqual(Token(TokenType.PLUS, 3), Token(TokenType.PLUS, 3, ""))
        self.assertNotEqual(Token(TokenType.PLUS, 3), Token(TokenType.PLUS, 4))
        self.assertNotEqual(Token(TokenType.IDENTIFIER, 1, "a"), Token(TokenType.IDENTIFIER, 1, "b"))

    def test_str(self):
        self.assertEqual(str(Token(TokenType.IDENTIFIER, 2, "main")), "2 IDENTIFIER main")
        self.assertEqual(str(Token(TokenType.OPEN_PAREN, 7)), "7 OPEN_PAREN")

    def test_repr(self):
        self.assertEqual(repr(Token(TokenType.INTEGER_LITERAL, 1, "42")),
                         "Token(INTEGER_LITERAL, 1, '42')")

    def test_categories(self):
        self.assertTrue(Token(TokenType.FLOAT_LITERAL, 1, "1.0").is_literal)
        self.assertTrue(Token(TokenType.WHILE, 1, "while").is_keyword)
        self.assertTrue(Token(TokenType.ARROW, 1).is_operator)
        self.assertTrue(Token(TokenType.COMMA, 1).is_punctuation)
        self.assertTrue(Token(TokenType.IDENTIFIER, 1, "x").is_identifier)

        self.assertFalse(Token(TokenType.IDENTIFIER, 1, "x").is_literal)
        self.assertFalse(Token(TokenType.COMMA, 1).is_operator)
        self.assertFalse(Token(TokenType.ARROW, 1).is_keyword)

    def test_sorting(self):
        tokens = [
            Token(TokenType.SEMICOLON, 1),
            Token(TokenType.IDENTIFIER, 2, "b"),
            Token(TokenType.INTEGER_LITERAL, 5, "1"),
            Token(TokenType.IDENTIFIER, 2, "a"),
        ]
        self.assertEqual(sorted(tokens), [
            Token(TokenType.INTEGER_LITERAL, 5, "1"),
            Token(TokenType.IDENTIFIER, 2, "a"),
            Token(TokenType.IDENTIFIER, 2, "b"),
            Token(TokenType.SEMICOLON, 1),
        ])


class TestTokenType(unittest.TestCase):

    def test_declaration_order(self):
        self.assertLess(TokenType.INTEGER_LITERAL, TokenType.IDENTIFIER)
        self.assertLess(TokenType.IDENTIFIER, TokenType.TRUE)
        self.assertLess(TokenType.CONTINUE, TokenType.OPEN_PAREN)
        self.assertLess(TokenType.OR, TokenType.NONE)

    def test_sentinels_last(self):
        members = list(TokenType)
        self.assertEqual(members[-2:], [TokenType.NONE, TokenType.UNKNOWN])


class TestLookupTables(unittest.TestCase):

    def test_keyword_spellings(self):
        expected = {
            "true", "false", "return", "public", "private", "module", "fn", "let",
            "if", "else", "while", "for", "loop", "struct", "implement", "enum",
            "unsafe", "asm", "trait", "switch", "async", "break", "continue",
        }
        self.assertEqual(set(KEYWORDS), expected)

    def test_operator_candidates_longest_first(self):
        for leading, candidates in OPERATORS.items():
            with self.subTest(leading=leading):
                lengths = [len(spelling) for spelling, _ in candidates]
                self.assertEqual(lengths, sorted(lengths, reverse=True))
                self.assertTrue(all(s.startswith(leading) for s, _ in candidates))
                self.assertTrue(all(len(s) <= 2 for s, _ in candidates))

    def test_unwired_kinds_absent_from_table(self):
        emitted = {kind for candidates in OPERATORS.values() for _, kind in candidates}
        for kind in (TokenType.PLUS_EQUALS, TokenType.MINUS_EQUALS, TokenType.TIMES_EQUALS,
                     TokenType.DIVIDE_EQUALS, TokenType.GET_REF):
            self.assertNotIn(kind, emitted)


class TestSourceLocation(unittest.TestCase):

    def test_str(self):
        self.assertEqual(str(SourceLocation("main.xe", 3, 14, 40)), "main.xe:3:14")


if __name__ == '__main__':
    unittest.main()
