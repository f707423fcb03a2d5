#!/usr/bin/env python3

from automata.nfa import NFA
from automata.nfa_state import EPSILON
from typing import Set

import random

def generate_random_nfa(
    num_states : int = 10, # Number of states
    num_acceptance_states : int = 1, # Number of acceptance states
    max_transitions : int = None, # Max number of transitions generated
    custom_alphabet : Set[str] = {"a","b","c"}, # Alphabet of the generated NFA
    no_epsilon : bool = True) -> NFA:
    """ Generates a random NFA through the builder calls """

    assert 0 < num_acceptance_states < num_states, "Number of acceptance states must be between 1 and the number of states minus 1"
    assert EPSILON not in custom_alphabet, "epsilon can't be part of the alphabet"

    states = ['q' + str(i) for i in range(num_states)]
    alphabet = sorted(custom_alphabet)

    nfa = NFA()
    for state in states : nfa.add_state(state)
    for char in alphabet : nfa.add_sigma(char)

    initial_state = random.choice(states)
    nfa.set_start(initial_state)

    # Select a random subset of Q as the acceptance states F, ensuring initial_state is not included
    remaining_states = [state for state in states if state != initial_state]
    for state in random.sample(remaining_states, num_acceptance_states) : nfa.set_final(state)

    if max_transitions is None:
        max_transitions = len(states) * len(alphabet)

    symbols = alphabet if no_epsilon else alphabet + [EPSILON]
    for _ in range(max_transitions):
        start_state = random.choice(states)
        end_state = random.choice(states)
        nfa.add_transition(start_state, {end_state}, random.choice(symbols))

    return nfa
