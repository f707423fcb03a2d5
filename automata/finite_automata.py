#!/usr/bin/env python3
from __future__ import annotations

from pydot import Dot, Edge, Node
from automata.nfa_state import NFAState, EPSILON
from typing import Set, Dict, List, Optional, KeysView
import logging

logger = logging.getLogger(__name__)

"""
PARENT CLASS FOR NFA

follows from the classical definition of a finite automata
which is a 5-tuple, (Q, Sigma, T, q0, F)
where T : Q x Sigma -> P(Q) (where P(Q) is the powerset of Q)

Q is kept as a registry of state objects by name (in insertion order), T lives
on the states themselves and F is the set of states with their final flag set.
"""
class Finite_Automata(object):
    def __init__(self):
        self.states : Dict[str, NFAState] = {}
        # used as an ordered set, epsilon never goes in here
        self.sigma : Dict[str, None] = {}
        self.start : Optional[NFAState] = None

    def get_state(self, name : str) -> Optional[NFAState]:
        """ the state called name, or None if there isn't one """
        return self.states.get(name)

    def get_sigma(self) -> KeysView[str]:
        return self.sigma.keys()

    def is_final(self, name : str) -> bool:
        state = self.get_state(name)
        return state is not None and state.is_final()

    def is_start(self, name : str) -> bool:
        state = self.get_state(name)
        return state is not None and state is self.start

    def get_to_state(self, from_state : Optional[NFAState], on_symb : str) -> Set[NFAState]:
        """ transition relation, e.g. state, char -> set of states """
        if from_state is None : return set()
        return from_state.to_states(on_symb)

    def final_states(self) -> List[NFAState]:
        return [state for state in self.states.values() if state.is_final()]

    def _names(self, states) -> str:
        # registry order, so output doesn't depend on set iteration order
        return "{" + " ".join(name for name, state in self.states.items() if state in states) + "}"

    def __str__(self) -> str:
        """ renders the 5-tuple, with T as a table of states against symbols """
        symbols = list(self.sigma) + [EPSILON]
        lines = []
        lines.append("Q = { " + " ".join(self.states) + " }")
        lines.append("Sigma = { " + " ".join(self.sigma) + " }")
        lines.append("delta =")
        lines.append("\t\t" + "\t".join(symbols))
        for name, state in self.states.items():
            row = [self._names(state.to_states(symbol)) for symbol in symbols]
            lines.append("\t" + name + "\t" + "\t".join(row))
        lines.append("q0 = " + (self.start.name if self.start is not None else ""))
        lines.append("F = { " + " ".join(state.name for state in self.final_states()) + " }")
        return "\n".join(lines) + "\n"

    def to_dot(self) -> Dot:
        """ builds the graphviz graph of this finite automata """
        graph = Dot(graph_type='digraph', rankdir='LR')
        nodes = {}

        for name, state in self.states.items():
            shape = 'doublecircle' if state.is_final() else 'circle'
            if state is self.start:
                nodes[name] = Node(name, shape=shape, color='green')
            else:
                nodes[name] = Node(name, shape=shape)

            graph.add_node(nodes[name])

        for name, state in self.states.items():
            for symbol in state.symbols():
                label = 'ε' if symbol == EPSILON else symbol
                for destination in state.to_states(symbol):
                    graph.add_edge(Edge(nodes[name], nodes[destination.name], label=label))

        return graph

    def show_diagram(self, path : str = "automata.png") -> None:
        """ creates a diagram of this finite automata, needs graphviz installed """
        logger.debug("writing diagram of %d states to %s", len(self.states), path)
        self.to_dot().write_png(path)
