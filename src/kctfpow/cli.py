"""
kctf-pow: command line front end

Usage:
    kctf-pow solve <challenge>      print the solution
    kctf-pow check <challenge>      read a solution from stdin, print correct/incorrect
    kctf-pow gen <difficulty>       print a random challenge
    kctf-pow ask <difficulty>       gen, then check a solution read from stdin

Exit code 0 on success, 1 on an incorrect or malformed solution or bad
arguments.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .codec import decode_challenge
from .errors import PowError
from .generator import generate
from .params import MAX_DIFFICULTY
from .solver import solve
from .types import ChallengeParams
from .verifier import check


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def _difficulty(text: str) -> int:
    # Plain ASCII digits with an optional '+'; int() would also take '_' and spaces
    digits = text[1:] if text.startswith('+') else text
    value = int(digits) if digits.isascii() and digits.isdigit() else -1
    if not 0 <= value <= MAX_DIFFICULTY:
        raise argparse.ArgumentTypeError("difficulty is not a valid 32-bit unsigned integer")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog='kctf-pow',
        description='Solve, check, and generate kCTF proof-of-work challenges',
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Log timing to stderr')
    sub = parser.add_subparsers(dest='command', required=True, parser_class=_Parser)

    p = sub.add_parser('solve', help='Solve a challenge')
    p.add_argument('challenge')
    p = sub.add_parser('check', help='Check a solution read from stdin')
    p.add_argument('challenge')
    p = sub.add_parser('gen', help='Generate a random challenge')
    p.add_argument('difficulty', type=_difficulty)
    p = sub.add_parser('ask', help='Generate a challenge, then check a solution from stdin')
    p.add_argument('difficulty', type=_difficulty)
    return parser


def _read_and_check(challenge: ChallengeParams) -> int:
    line = sys.stdin.readline()
    if check(challenge, line.strip()):
        print("correct")
        return 0
    print("incorrect")
    print("Error: challenge verification failed", file=sys.stderr)
    return 1


def run(args: argparse.Namespace) -> int:
    if args.command == 'solve':
        print(solve(decode_challenge(args.challenge)))
    elif args.command == 'check':
        return _read_and_check(decode_challenge(args.challenge))
    elif args.command == 'gen':
        print(generate(args.difficulty))
    elif args.command == 'ask':
        challenge = generate(args.difficulty)
        print(challenge, flush=True)
        return _read_and_check(challenge)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )

    try:
        return run(args)
    except PowError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
