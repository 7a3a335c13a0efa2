#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VNF components and the service chains they form.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Component:
    index: int
    requirements: Tuple[float, ...]


@dataclass(frozen=True)
class VnfDemand:
    """ Bandwidth demanded between two components (0-based IDs) """
    source: int
    target: int
    bandwidth: float


class ServiceChain:
    """
    An ordered chain of components with a maximal end-to-end latency.
    Components are only ever appended.
    """

    def __init__(self, latency):
        self._components = []
        self._latency = latency

    def add_component(self, component):
        self._components.append(component)

    @property
    def components(self):
        return tuple(self._components)

    @property
    def latency(self):
        """ Maximal latency permitted for the chain """
        return self._latency

    def __iter__(self):
        return iter(self._components)

    def __len__(self):
        return len(self._components)

    def __repr__(self):
        return "ServiceChain(latency=%r, components=%r)" % (
            self._latency, [c.index for c in self._components])
