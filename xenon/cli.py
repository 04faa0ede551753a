#!/usr/bin/env python3
"""
Token dump tool for Xenon source files.

Prints the tokens of each input, one per line as "<line> <KIND> <value>",
or as JSON with --json.

Author: xwest
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer import LexerError, Token, tokenize

logger = logging.getLogger(__name__)


def token_to_dict(token: Token) -> dict:
    return {"line": token.line, "kind": token.kind.name, "value": token.value}


def format_tokens(tokens: List[Token], as_json: bool = False) -> str:
    """Render a token list for output."""
    if as_json:
        return json.dumps([token_to_dict(t) for t in tokens], indent=2)
    return "\n".join(str(t) for t in tokens)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the token dump tool"""

    parser = argparse.ArgumentParser(
        prog="xenon-lex",
        description="Tokenize Xenon source files and print the tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    xenon-lex main.xe                # Print tokens
    xenon-lex --json main.xe         # Tokens as a JSON array
    xenon-lex --count a.xe b.xe      # Token count per file
    cat main.xe | xenon-lex -        # Read from stdin
        """
    )

    parser.add_argument('paths', nargs='+', metavar='PATH',
                        help='Source files to tokenize ("-" for stdin)')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('--count', action='store_true',
                        help='Print only the number of tokens')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s:%(name)s:%(message)s'
    )

    for path in args.paths:
        filename = "<stdin>" if path == "-" else path
        try:
            source = _read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", path, e)
            return 2

        try:
            tokens = tokenize(source, filename)
        except LexerError as e:
            sys.stderr.write(str(e))
            return 1

        if args.count:
            print(f"{filename}: {len(tokens)}")
            continue

        output = format_tokens(tokens, as_json=args.json)
        if output:
            print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
