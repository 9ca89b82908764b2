import argparse
import sys

from thompson.compiler import compile
from thompson.exceptions import CompileError

from .subcommand import Subcommand


@Subcommand.register("show")
class ShowCommand(Subcommand):
    """print the automaton compiled from a pattern"""

    def setup(self) -> None:
        self.parser.add_argument(
            "pattern",
            type=str,
            help="pattern to compile",
        )

    def run(self, args: argparse.Namespace) -> None:
        try:
            nfa = compile(args.pattern)
        except CompileError as e:
            print(f"Invalid pattern {args.pattern!r}: {e}", file=sys.stderr)
            sys.exit(1)

        nfa.show()
