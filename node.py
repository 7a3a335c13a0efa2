#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Node and server entities of the physical network.
"""
import numpy as np


class Node:

    def __init__(self, index, power):
        self.index = index
        """ Node index/ID (0-based) """
        self.power = power
        """ Power consumed by the node """
        self.links = []
        """ Indices of the links connected to the node """
        self.neighbors = []
        """ Indices of the neighboring nodes """
        self.servers = []
        """ Indices of the servers attached to the node """

    @property
    def degree(self):
        """ Degree of the node (number of connected links) """
        return len(self.links)

    def __str__(self):
        """ Returns a string of the node characteristics """
        return str({'node': self.index, 'power': self.power, 'links': self.links,
                    'neighbors': self.neighbors, 'servers': self.servers})

    def msg(self):
        """
        Print the string representation of the node's characteristics by calling __str__().
        """
        print(self.__str__())


class Server:

    def __init__(self, index, p_min, p_max, node, resources):
        self.index = index
        """ Server index/ID (0-based) """
        self.p_min = p_min
        """ Power drawn by the idle server """
        self.p_max = p_max
        """ Power drawn by the fully loaded server """
        self.node = node
        """ Index of the node the server is attached to """
        self.resources = np.asarray(resources, dtype=float)
        """ Available amount of each resource kind, ordered by resource index """

    def can_host(self, requirements):
        """
        Checks whether the server's resources cover a requirement vector.

        Args:
            requirements (sequence): Demanded amount of each resource kind.

        Returns:
            bool: True if every demanded amount fits in the available one.
        """
        return bool(np.all(np.asarray(requirements, dtype=float) <= self.resources))

    def __str__(self):
        """ Returns a string of the server characteristics """
        return str({'server': self.index, 'p_min': self.p_min, 'p_max': self.p_max,
                    'node': self.node, 'resources': self.resources.tolist()})

    def msg(self):
        print(self.__str__())
