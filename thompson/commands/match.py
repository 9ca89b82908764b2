import argparse
import sys
from logging import getLogger

from thompson.compiler import compile
from thompson.exceptions import CompileError

from .subcommand import Subcommand

logger = getLogger(__name__)


@Subcommand.register("match")
class MatchCommand(Subcommand):
    """test whether the whole text matches a pattern"""

    def setup(self) -> None:
        self.parser.add_argument(
            "pattern",
            type=str,
            help="pattern to compile",
        )
        self.parser.add_argument(
            "text",
            type=str,
            help="text to test against the pattern",
        )

    def run(self, args: argparse.Namespace) -> None:
        try:
            nfa = compile(args.pattern)
        except CompileError as e:
            print(f"Invalid pattern {args.pattern!r}: {e}", file=sys.stderr)
            sys.exit(1)

        logger.debug("Compiled %r into %s", args.pattern, nfa)

        if nfa.accepts(args.text):
            print(f"{args.text} matches {args.pattern}")
        else:
            print(f"{args.text} doesn't match {args.pattern}")
