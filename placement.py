#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Assignment of VNF components to servers.
"""
import numpy as np


class Placement:

    def __init__(self, assignment, number_of_servers):
        self.assignment = tuple(None if s is None else int(s) for s in assignment)
        """ Server index hosting each component, None for an unplaced component """
        self.number_of_servers = number_of_servers
        """ Width of the one-hot rendering """
        for s in self.assignment:
            if s is not None and not 0 <= s < number_of_servers:
                raise ValueError("Server index %d outside [0, %d)" % (s, number_of_servers))

    def server_of(self, component):
        return self.assignment[component]

    def as_matrix(self):
        """
        Returns:
            np.ndarray: Component x server one-hot matrix, an unplaced component gives a zero row.
        """
        x = np.zeros((len(self.assignment), self.number_of_servers), dtype=int)
        for c, s in enumerate(self.assignment):
            if s is not None:
                x[c, s] = 1
        return x

    def __len__(self):
        return len(self.assignment)

    def __eq__(self, other):
        if not isinstance(other, Placement):
            return NotImplemented
        return self.assignment == other.assignment and self.number_of_servers == other.number_of_servers

    def __hash__(self):
        return hash((self.assignment, self.number_of_servers))

    def __str__(self):
        rows = ["[" + ",".join(str(v) for v in row) + "]" for row in self.as_matrix().tolist()]
        return "x=[" + ",".join(rows) + "];"
