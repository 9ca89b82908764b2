import dataclasses
from typing import AbstractSet, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

State = int
Label = Optional[str]
Transitions = Dict[State, List[Tuple[Label, State]]]

EPSILON: Label = None


@dataclasses.dataclass
class NFA:
    """
    A nondeterministic finite automaton with a single start and a single accept state.

    States are plain integers allocated by the compiler, and transitions are kept as an
    adjacency list keyed by the source state. A label of `None` denotes an epsilon
    transition, any other label is exactly one character.
    """

    start: State
    accept: State
    transitions: Transitions = dataclasses.field(default_factory=dict)

    def __str__(self) -> str:
        return f"NFA(start={self.start}, accept={self.accept}, states={len(self.states)})"

    @property
    def states(self) -> FrozenSet[State]:
        states = {self.start, self.accept}
        for source, pairs in self.transitions.items():
            states.add(source)
            states.update(target for _, target in pairs)
        return frozenset(states)

    def add_transition(self, source: State, label: Label, target: State) -> None:
        self.transitions.setdefault(source, []).append((label, target))

    def epsilon_closure(self, states: Iterable[State]) -> Set[State]:
        """
        Return the smallest superset of `states` closed under epsilon transitions.
        """

        closure = set(states)
        stack = list(closure)
        while stack:
            state = stack.pop()
            for label, target in self.transitions.get(state, ()):
                if label is EPSILON and target not in closure:
                    closure.add(target)
                    stack.append(target)
        return closure

    def move(self, states: AbstractSet[State], symbol: str) -> Set[State]:
        """
        Return the states reachable from `states` through a single `symbol` transition.
        """

        return {
            target
            for source in states
            for label, target in self.transitions.get(source, ())
            if label == symbol
        }

    def accepts(self, text: str) -> bool:
        current = self.epsilon_closure({self.start})
        for symbol in text:
            if not current:
                return False
            current = self.epsilon_closure(self.move(current, symbol))
        return self.accept in current

    def describe(self) -> str:
        lines = [f"start: {self.start}", f"accept: {self.accept}"]
        for source, pairs in self.transitions.items():
            for label, target in pairs:
                symbol = "ε" if label is EPSILON else repr(label)
                lines.append(f"  {source} --{symbol}--> {target}")
        return "\n".join(lines)

    def show(self) -> None:
        """
        Print the NFA in a human-readable format.
        """
        print(self.describe())


def simulate(nfa: NFA, text: str) -> bool:
    """
    Decide whether `nfa` accepts the whole of `text`.
    """
    return nfa.accepts(text)
