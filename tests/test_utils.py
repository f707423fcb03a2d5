import random

import pytest
from automata.nfa_state import EPSILON
from utils import generate_random_nfa


def brute_accepts(nfa, word):
    """ depth first search over (state, position) pairs """
    seen = set()
    stack = [(nfa.start, 0)]
    while stack:
        state, i = stack.pop()
        if (state, i) in seen:
            continue
        seen.add((state, i))
        if i == len(word) and state.is_final():
            return True
        for nxt in state.to_states(EPSILON):
            stack.append((nxt, i))
        if i < len(word):
            for nxt in state.to_states(word[i]):
                stack.append((nxt, i + 1))
    return False


def random_words(alphabet, count=30, length=6):
    return ["".join(random.choice(alphabet) for _ in range(random.randint(0, length))) for _ in range(count)]


def test_generated_shape():
    random.seed(1)
    nfa = generate_random_nfa(num_states=6, num_acceptance_states=2)
    assert list(nfa.states) == ["q0", "q1", "q2", "q3", "q4", "q5"]
    assert set(nfa.get_sigma()) == {"a", "b", "c"}
    assert nfa.start is not None
    assert len(nfa.final_states()) == 2
    assert nfa.start not in nfa.final_states()


def test_generated_without_epsilon():
    random.seed(2)
    for _ in range(10):
        nfa = generate_random_nfa(num_states=5)
        for state in nfa.states.values():
            assert state.to_states(EPSILON) == set()


def test_generator_rejects_bad_arguments():
    with pytest.raises(AssertionError):
        generate_random_nfa(num_states=2, num_acceptance_states=2)
    with pytest.raises(AssertionError):
        generate_random_nfa(custom_alphabet={"a", EPSILON})


def test_random_accepts_matches_search():
    random.seed(3)
    for _ in range(25):
        nfa = generate_random_nfa(num_states=5, num_acceptance_states=2, no_epsilon=False)
        for word in random_words(["a", "b", "c"]):
            assert nfa.accepts(word) == brute_accepts(nfa, word)


def test_random_max_copies_bounds():
    random.seed(4)
    for _ in range(25):
        nfa = generate_random_nfa(num_states=6, no_epsilon=False)
        initial = len(nfa.e_closure(nfa.start))
        assert nfa.max_copies("") == initial
        for word in random_words(["a", "b", "c"]):
            copies = nfa.max_copies(word)
            assert initial <= copies <= len(nfa.states)


def test_random_is_dfa():
    random.seed(5)
    for _ in range(25):
        nfa = generate_random_nfa(num_states=4, max_transitions=5, no_epsilon=False)
        expected = all(
            not state.to_states(EPSILON) and all(len(state.to_states(c)) <= 1 for c in nfa.get_sigma())
            for state in nfa.states.values()
        )
        assert nfa.is_dfa() == expected
