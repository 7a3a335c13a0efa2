#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sparse matrix addressed by a pair of keys.
"""


class Matrix:
    """
    Maps an ordered pair of keys (k1, k2) to a single value.

    Stored as a two-level dictionary, so first-level keys come back in the order
    they were first used and the values of a row in the order their pairs were
    first inserted.
    """

    def __init__(self):
        self.rows = {}
        """ First-level key -> {second-level key -> value} """

    def put(self, k1, k2, value):
        """ Inserts the value for (k1, k2), replacing any previous one """
        self.rows.setdefault(k1, {})[k2] = value

    def get(self, k1, k2, default=None):
        """ Returns the value for (k1, k2), or `default` when the pair is absent """
        return self.rows.get(k1, {}).get(k2, default)

    def keys(self):
        """ First-level keys holding at least one value """
        return list(self.rows)

    def values_for(self, k1):
        """ Values whose first key is k1 """
        return list(self.rows.get(k1, {}).values())

    def items(self):
        for k1, row in self.rows.items():
            for k2, value in row.items():
                yield k1, k2, value

    def __contains__(self, pair):
        k1, k2 = pair
        return k2 in self.rows.get(k1, {})

    def __len__(self):
        return sum(len(row) for row in self.rows.values())

    def __repr__(self):
        return "Matrix(%r)" % self.rows
