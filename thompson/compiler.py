"""
Pattern compiler based on Thompson's construction.

The grammar is parsed by recursive descent with a single character of lookahead:

    regex         := alternation
    alternation   := concatenation ('|' concatenation)*
    concatenation := repetition+
    repetition    := primary '*'?
    primary       := '(' regex ')' | LITERAL

Each production returns a self-contained NFA fragment. Composing rules take over the
transitions of their operands, so operands must not be used after being composed.
"""

from typing import Optional

from thompson.automaton import EPSILON, NFA, State
from thompson.exceptions import EmptyExpression, TrailingInput, UnclosedGroup, UnexpectedToken

OPERATORS = frozenset("()|*")


class Compiler:
    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._position = 0
        self._next_state: State = 0

    def compile(self) -> NFA:
        nfa = self._parse_regex()
        if self._peek() is not None:
            raise TrailingInput(self._pattern, self._position)
        return nfa

    def _fresh(self) -> State:
        state = self._next_state
        self._next_state += 1
        return state

    def _peek(self) -> Optional[str]:
        if self._position < len(self._pattern):
            return self._pattern[self._position]
        return None

    def _consume(self) -> Optional[str]:
        char = self._peek()
        if char is not None:
            self._position += 1
        return char

    def _eat(self, expected: str) -> bool:
        if self._peek() == expected:
            self._consume()
            return True
        return False

    def _parse_regex(self) -> NFA:
        return self._parse_alternation()

    def _parse_alternation(self) -> NFA:
        left = self._parse_concatenation()
        while self._eat("|"):
            right = self._parse_concatenation()
            left = self._build_alternation(left, right)
        return left

    def _parse_concatenation(self) -> NFA:
        result: Optional[NFA] = None
        while True:
            char = self._peek()
            if char is None or char in ")|":
                break
            repetition = self._parse_repetition()
            result = repetition if result is None else self._build_concatenation(result, repetition)

        if result is None:
            raise EmptyExpression(self._pattern, self._position)
        return result

    def _parse_repetition(self) -> NFA:
        nfa = self._parse_primary()
        if self._eat("*"):
            nfa = self._build_star(nfa)
        return nfa

    def _parse_primary(self) -> NFA:
        char = self._peek()
        if char == "(":
            self._consume()
            nfa = self._parse_regex()
            if not self._eat(")"):
                raise UnclosedGroup(self._pattern, self._position)
            return nfa
        if char is None or char in OPERATORS:
            raise UnexpectedToken(self._pattern, self._position)
        self._consume()
        return self._build_literal(char)

    def _build_literal(self, char: str) -> NFA:
        nfa = NFA(self._fresh(), self._fresh())
        nfa.add_transition(nfa.start, char, nfa.accept)
        return nfa

    def _build_concatenation(self, left: NFA, right: NFA) -> NFA:
        nfa = NFA(left.start, right.accept, {**left.transitions, **right.transitions})
        nfa.add_transition(left.accept, EPSILON, right.start)
        return nfa

    def _build_alternation(self, left: NFA, right: NFA) -> NFA:
        nfa = NFA(self._fresh(), self._fresh(), {**left.transitions, **right.transitions})
        nfa.add_transition(nfa.start, EPSILON, left.start)
        nfa.add_transition(nfa.start, EPSILON, right.start)
        nfa.add_transition(left.accept, EPSILON, nfa.accept)
        nfa.add_transition(right.accept, EPSILON, nfa.accept)
        return nfa

    def _build_star(self, inner: NFA) -> NFA:
        nfa = NFA(self._fresh(), self._fresh(), inner.transitions)
        nfa.add_transition(nfa.start, EPSILON, inner.start)
        nfa.add_transition(nfa.start, EPSILON, nfa.accept)
        nfa.add_transition(inner.accept, EPSILON, inner.start)
        nfa.add_transition(inner.accept, EPSILON, nfa.accept)
        return nfa


def compile(pattern: str) -> NFA:
    """
    Compile `pattern` into an NFA.

    Raises:
        CompileError: If the pattern is malformed. The first error found is raised.
    """
    return Compiler(pattern).compile()
