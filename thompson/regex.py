from thompson.automaton import NFA, simulate
from thompson.compiler import compile


class Regex:
    """
    A compiled pattern that can be matched against many inputs.

    Only whole-string membership is tested: `match` returns `True` iff the entire
    text belongs to the language of the pattern.

    Example:
        >>> regex = Regex("(a|b)*c")
        >>> regex.match("abbac")
        True
        >>> regex.match("abba")
        False

    Args:
        pattern: The pattern to compile.

    Raises:
        CompileError: If the pattern is malformed.
    """

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._nfa = compile(pattern)

    def __repr__(self) -> str:
        return f"Regex({self._pattern!r})"

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def nfa(self) -> NFA:
        return self._nfa

    def match(self, text: str) -> bool:
        return simulate(self._nfa, text)


def matches(pattern: str, text: str) -> bool:
    return simulate(compile(pattern), text)
