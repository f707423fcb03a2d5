#!/usr/bin/env python3
from __future__ import annotations

from automata.state import State
from typing import Set, Dict, List

# label of transitions that don't consume a character
EPSILON = 'e'

"""
a single NFA state. holds its own flags and its outgoing edges,
e.g. T(q) : Sigma U {e} -> P(Q)

destinations are references to states owned by the automaton,
so the graph can have self loops and epsilon cycles.
"""
class NFAState(State):
    def __init__(self, name : str):
        State.__init__(self, name)
        self.start = False
        self.final = False
        self.transitions : Dict[str, Set[NFAState]] = {}

    def is_start(self) -> bool:
        return self.start

    def set_start(self, value : bool) -> None:
        self.start = value

    def is_final(self) -> bool:
        return self.final

    def make_final(self) -> None:
        self.final = True

    def add_transition(self, symbol : str, destination : NFAState) -> None:
        """ adds an edge on symbol to destination, adding the same edge twice does nothing """
        if symbol not in self.transitions : self.transitions[symbol] = set()
        self.transitions[symbol].add(destination)

    def to_states(self, symbol : str) -> Set[NFAState]:
        """ destinations on symbol, an empty set if there are none """
        return self.transitions.get(symbol, set())

    def symbols(self) -> List[str]:
        return [symbol for symbol, destinations in self.transitions.items() if destinations]
