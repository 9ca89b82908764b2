from thompson.automaton import EPSILON, NFA, simulate


def build_ab_star() -> NFA:
    # (ab)* built by hand: 0 -a-> 1 -ε-> 2 -b-> 3, wrapped by 4 / 5
    nfa = NFA(4, 5)
    nfa.add_transition(0, "a", 1)
    nfa.add_transition(1, EPSILON, 2)
    nfa.add_transition(2, "b", 3)
    nfa.add_transition(4, EPSILON, 0)
    nfa.add_transition(4, EPSILON, 5)
    nfa.add_transition(3, EPSILON, 0)
    nfa.add_transition(3, EPSILON, 5)
    return nfa


def test_add_transition_preserves_insertion_order() -> None:
    nfa = NFA(0, 1)
    nfa.add_transition(0, "x", 1)
    nfa.add_transition(0, EPSILON, 1)
    nfa.add_transition(0, "y", 1)
    assert nfa.transitions == {0: [("x", 1), (None, 1), ("y", 1)]}


def test_states() -> None:
    assert build_ab_star().states == frozenset(range(6))


def test_epsilon_closure_terminates_on_cycles() -> None:
    nfa = NFA(0, 2)
    nfa.add_transition(0, EPSILON, 1)
    nfa.add_transition(1, EPSILON, 0)
    nfa.add_transition(1, EPSILON, 2)
    nfa.add_transition(2, "a", 0)
    assert nfa.epsilon_closure({0}) == {0, 1, 2}
    assert nfa.epsilon_closure(set()) == set()


def test_move_ignores_epsilon_and_other_labels() -> None:
    nfa = build_ab_star()
    assert nfa.move({0, 2, 4}, "a") == {1}
    assert nfa.move({0, 2, 4}, "b") == {3}
    assert nfa.move({1, 3, 4}, "a") == set()


def test_simulate() -> None:
    nfa = build_ab_star()
    assert simulate(nfa, "")
    assert simulate(nfa, "ab")
    assert simulate(nfa, "ababab")
    assert not simulate(nfa, "a")
    assert not simulate(nfa, "aba")
    assert not simulate(nfa, "ba")


def test_simulate_does_not_mutate_automaton() -> None:
    nfa = build_ab_star()
    before = {state: list(pairs) for state, pairs in nfa.transitions.items()}
    simulate(nfa, "ababx")
    assert nfa.transitions == before


def test_describe() -> None:
    nfa = NFA(0, 1)
    nfa.add_transition(0, "a", 1)
    nfa.add_transition(1, EPSILON, 0)
    assert nfa.describe() == "start: 0\naccept: 1\n  0 --'a'--> 1\n  1 --ε--> 0"
