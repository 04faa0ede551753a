#!/usr/bin/env python3
"""
Main test runner for the Xenon lexer tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_lexer_smoke_test() -> bool:
    """Lex a small program end to end before running the suite."""
    from xenon.lexer import tokenize, LexerError

    code = """
    fn add(a: i32, b: i32) -> i32 {
        return a + b;
    }

    fn main() -> i32 {
        let result = add(5, 10);
        return result;
    }
    """

    try:
        tokens = tokenize(code, "<smoke>")
    except LexerError as e:
        print(f"❌ Smoke test failed:\n{e}")
        return False

    print(f"✅ Smoke test lexed {len(tokens)} tokens")
    return True


def run_all_tests() -> bool:
    """Run all Xenon lexer tests."""

    print("🚀 Xenon Lexer Test Suite")
    print("=" * 60)

    if not run_lexer_smoke_test():
        return False
    print()

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), pattern="test_*.py")
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors "
              f"out of {result.testsRun} tests")

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
