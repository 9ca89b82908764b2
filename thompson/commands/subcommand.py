from __future__ import annotations

import argparse
import sys
from typing import Callable, ClassVar, Dict, Sequence, Type


class Subcommand:
    """
    A command line subcommand.

    Subclasses are registered by name with `Subcommand.register`, add their arguments
    in `setup` and do their work in `run`. An instance of the base class wraps the
    root parser and dispatches to the registered subcommands when called.
    """

    _registry: ClassVar[Dict[str, Type[Subcommand]]] = {}

    def __init__(self, parser: argparse.ArgumentParser) -> None:
        self.parser = parser
        self.setup()

    @classmethod
    def register(cls, name: str, exist_ok: bool = False) -> Callable[[Type[Subcommand]], Type[Subcommand]]:
        def wrapper(subcommand: Type[Subcommand]) -> Type[Subcommand]:
            if not exist_ok and name in cls._registry:
                raise ValueError(f"Subcommand '{name}' was already registered.")

            cls._registry[name] = subcommand
            return subcommand

        return wrapper

    @classmethod
    def available_names(cls) -> Sequence[str]:
        return list(cls._registry)

    def setup(self) -> None:
        pass

    def run(self, args: argparse.Namespace) -> None:
        raise NotImplementedError

    def __call__(self, args: Sequence[str] | None = None) -> None:
        subparsers = self.parser.add_subparsers()
        for name, subcommand_class in self._registry.items():
            subparser = subparsers.add_parser(name, help=subcommand_class.__doc__)
            subparser.set_defaults(_subcommand=subcommand_class(subparser))

        namespace = self.parser.parse_args(args)
        subcommand = vars(namespace).pop("_subcommand", None)
        if subcommand is None:
            self.parser.print_help()
            sys.exit(1)

        subcommand.run(namespace)
