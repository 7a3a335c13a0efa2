#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A possible solution: a placement together with its routing table.
"""
from keyed_matrix import Matrix


class Solution:

    def __init__(self, placement, routes):
        """
        Args:
            placement (Placement): Assignment of components to servers.
            routes (Matrix or iterable): Either a routing Matrix keyed by (from, to),
                used as given, or Route values indexed by their own endpoints.
                A later route for the same pair replaces an earlier one.
        """
        self._placement = placement
        if isinstance(routes, Matrix):
            self._routes = routes
        else:
            self._routes = Matrix()
            for r in routes:
                self._routes.put(r.source, r.target, r)

    @property
    def placement(self):
        return self._placement

    @property
    def routes(self):
        return self._routes

    def __str__(self):
        groups = [",\n".join(str(r) for r in self._routes.values_for(source))
                  for source in self._routes.keys()]
        return str(self._placement) + "\nroutes={\n" + ",\n".join(groups) + "\n};"
