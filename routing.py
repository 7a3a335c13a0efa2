#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Routing decision between an ordered pair of network nodes.
"""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Route:
    source: int
    target: int
    path: Tuple[int, ...] = field(default=())
    """ Nodes visited from source to target, both included; empty when only the endpoints are known """

    def __post_init__(self):
        object.__setattr__(self, 'path', tuple(int(n) for n in self.path))

    @property
    def key(self):
        return self.source, self.target

    def __str__(self):
        nodes = self.path or (self.source, self.target)
        # node ids are written 1-based, as in the instance edges
        return "<" + ",".join(str(n + 1) for n in nodes) + ">"
