#!/usr/bin/env python3
from __future__ import annotations

from automata.finite_automata import Finite_Automata
from automata.nfa_state import NFAState, EPSILON
from typing import Set, Iterable
import logging

logger = logging.getLogger(__name__)

"""
follows from the exact formal definition of a NFA
which is a 5-tuple, (Q, Sigma, T, q0, F)
where T : Q x Sigma -> P(Q) (where P(Q) is the powerset of Q)

in this library we include epsilon transitions. e.g., we can
make a transition without consuming a character from a word.
epsilon is the 'e' label and never has to be declared in sigma.

the automata is built up one call at a time. every builder call returns
False instead of raising when it can't be applied, and never applies
half of a change.
"""
class NFA(Finite_Automata):
    def __init__(self):
        Finite_Automata.__init__(self)

    def add_state(self, name : str) -> bool:
        if name in self.states:
            logger.debug("add_state: %r already exists", name)
            return False

        self.states[name] = NFAState(name)
        return True

    def set_final(self, name : str) -> bool:
        state = self.get_state(name)
        if state is None:
            logger.debug("set_final: no state %r", name)
            return False

        state.make_final()
        return True

    def set_start(self, name : str) -> bool:
        state = self.get_state(name)
        if state is None:
            logger.debug("set_start: no state %r", name)
            return False

        # only one state may carry the start flag
        for other in self.states.values() : other.set_start(False)

        state.set_start(True)
        self.start = state
        return True

    def add_sigma(self, symbol : str) -> None:
        if symbol == EPSILON:
            logger.debug("add_sigma: epsilon is implicit, not adding it to sigma")
            return
        self.sigma[symbol] = None

    def add_transition(self, from_state : str, to_states : Iterable[str], on_symb : str) -> bool:
        """
        adds an edge from from_state to every state in to_states on on_symb.

        returns False, without adding anything, if from_state or any of to_states
        doesn't exist or on_symb is neither epsilon nor in sigma
        """
        source = self.get_state(from_state)
        if source is None:
            logger.debug("add_transition: no source state %r", from_state)
            return False

        if on_symb != EPSILON and on_symb not in self.sigma:
            logger.debug("add_transition: symbol %r not in sigma", on_symb)
            return False

        # resolve every destination before touching the transition table
        destinations = []
        for name in to_states:
            destination = self.get_state(name)
            if destination is None:
                logger.debug("add_transition: no destination state %r", name)
                return False
            destinations.append(destination)

        for destination in destinations : source.add_transition(on_symb, destination)
        return True

    def e_closure(self, s : NFAState) -> Set[NFAState]:
        """ all states reachable from s using only epsilon transitions, s included """
        assert s is not None, "e_closure: no state given"

        closure = {s}
        stack = [s]
        while stack:
            current = stack.pop()
            for state in current.to_states(EPSILON):
                if state not in closure:
                    closure.add(state)
                    stack.append(state)

        return closure

    def _initial_states(self) -> Set[NFAState]:
        assert self.start is not None, "simulation: no start state set"
        return self.e_closure(self.start)

    def _step(self, current : Set[NFAState], char : str) -> Set[NFAState]:
        """ every state reachable from current on char, followed by its epsilon closure """
        reached = set()
        for state in current:
            for destination in self.get_to_state(state, char):
                if destination not in reached : reached |= self.e_closure(destination)

        return reached

    def accepts(self, s : str) -> bool:
        """ subset simulation of the NFA on s, True if a final state is active at the end """
        current = self._initial_states()

        for i, char in enumerate(s):
            current = self._step(current, char)
            # no state left to be in, nothing more can be read
            if not current:
                logger.debug("accepts: %r dies at position %d", s, i)
                return False

        return any(state.is_final() for state in current)

    def max_copies(self, s : str) -> int:
        """
        the largest number of states active at once while reading s,
        counting the initial closure.

        stops at the first character that leaves no active state and
        returns the largest count seen up to there
        """
        current = self._initial_states()
        max_num_copies = len(current)

        for i, char in enumerate(s):
            current = self._step(current, char)
            if not current:
                logger.debug("max_copies: %r dies at position %d", s, i)
                break

            max_num_copies = max(max_num_copies, len(current))

        return max_num_copies

    def is_dfa(self) -> bool:
        """ True if T has no epsilon transitions and at most one destination per state and symbol """
        for state in self.states.values():
            if state.to_states(EPSILON) : return False

            for symbol in self.sigma:
                if len(state.to_states(symbol)) > 1 : return False

        return True
