#!/usr/bin/env python3

"""
PARENT CLASS FOR NFA STATES

a state is only identified by its name. two state objects with the same name
are still different states, equality and hashing are by identity.
"""
class State(object):
    def __init__(self, name : str):
        self.name = name

    def get_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return "<%s %s>" % (type(self).__name__, self.name)
