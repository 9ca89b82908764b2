from __future__ import annotations

import argparse
from typing import Sequence

from thompson import __version__
from thompson.commands import grep, match, show  # noqa: F401
from thompson.commands.subcommand import Subcommand


def create_subcommand(prog: str | None = None) -> Subcommand:
    parser = argparse.ArgumentParser(usage="%(prog)s", prog=prog)
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + __version__,
    )
    return Subcommand(parser)


def main(prog: str | None = None, args: Sequence[str] | None = None) -> None:
    app = create_subcommand(prog)
    app(args)
