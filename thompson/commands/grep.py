import argparse
import sys
from logging import getLogger

import minato

from thompson.exceptions import CompileError
from thompson.regex import Regex

from .subcommand import Subcommand

logger = getLogger(__name__)


@Subcommand.register("grep")
class GrepCommand(Subcommand):
    """print the lines of a file that match a pattern as a whole"""

    def setup(self) -> None:
        self.parser.add_argument(
            "pattern",
            type=str,
            help="pattern to compile",
        )
        self.parser.add_argument(
            "filename",
            type=str,
            help="path or URL of the file to scan",
        )
        self.parser.add_argument(
            "-v",
            "--invert-match",
            action="store_true",
            help="print the lines that do not match instead",
        )

    def run(self, args: argparse.Namespace) -> None:
        try:
            regex = Regex(args.pattern)
        except CompileError as e:
            print(f"Invalid pattern {args.pattern!r}: {e}", file=sys.stderr)
            sys.exit(1)

        logger.info("Scanning %s with %r", args.filename, regex)

        num_selected = 0
        with minato.open(args.filename) as textfile:
            for line in textfile:
                line = line.rstrip("\r\n")
                if regex.match(line) != args.invert_match:
                    num_selected += 1
                    print(line)

        logger.info("Selected %d lines", num_selected)
