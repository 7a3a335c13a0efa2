#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Physical network assembled from a problem instance.
"""
import logging

import matplotlib.pyplot as plt
import networkx as nx

from link import Link
from node import Node, Server

logger = logging.getLogger(__name__)


class Network:
    """
    An accumulating graph of nodes, links and servers.

    Registration methods report success with a boolean and never raise, the
    caller decides what a refusal means.
    """

    def __init__(self, num_nodes, num_servers):
        self.num_nodes = num_nodes
        """ Total number of node slots in the network """
        self.num_servers = num_servers
        """ Total number of server slots in the network """
        self.node = {}
        """ Registered nodes, indexed by node ID """
        self.link = []
        """ Registered links, in registration order """
        self.server = {}
        """ Connected servers, indexed by server ID """

    def add_node(self, node):
        """
        Registers a node.

        Returns:
            bool: False if every node slot is taken, the node ID is out of range or already registered.
        """
        if len(self.node) >= self.num_nodes:
            return False
        if not 0 <= node.index < self.num_nodes or node.index in self.node:
            return False
        self.node[node.index] = node
        return True

    def add_link(self, n1, n2, bandwidth, power, delay):
        """
        Connects two registered nodes with a link.

        Returns:
            bool: False if either endpoint is not a registered node.
        """
        if n1 not in self.node or n2 not in self.node:
            return False
        link = Link(len(self.link), bandwidth, power, delay, [n1, n2])
        self.link.append(link)
        self.node[n1].links.append(link.index)
        if n2 != n1:
            self.node[n2].links.append(link.index)
        # Assigning neighbors
        if n2 not in self.node[n1].neighbors:
            self.node[n1].neighbors.append(n2)
        if n1 not in self.node[n2].neighbors:
            self.node[n2].neighbors.append(n1)
        return True

    def connect_server(self, server_id, p_min, p_max, node_id, resources):
        """
        Attaches a server to a registered node.

        Returns:
            bool: False if the server ID is out of range or already connected, or the node is not registered.
        """
        if not 0 <= server_id < self.num_servers or server_id in self.server:
            return False
        if node_id not in self.node:
            return False
        self.server[server_id] = Server(server_id, p_min, p_max, node_id, resources)
        self.node[node_id].servers.append(server_id)
        return True

    @property
    def nodes(self):
        """ Registered nodes ordered by ID """
        return [self.node[i] for i in sorted(self.node)]

    @property
    def links(self):
        return list(self.link)

    @property
    def servers(self):
        """ Connected servers ordered by ID """
        return [self.server[i] for i in sorted(self.server)]

    def get_node(self, index):
        return self.node.get(index)

    def get_server(self, index):
        return self.server.get(index)

    def neighbors(self, index):
        return list(self.node[index].neighbors)

    def links_between(self, a, b):
        """ Returns every link joining nodes `a` and `b`, in either direction """
        return [l for l in self.link if sorted(l.nodeindex) == sorted([a, b])]

    def to_networkx(self):
        """Converts the network to a NetworkX multigraph, keeping parallel links."""
        g = nx.MultiGraph()
        for node in self.nodes:
            g.add_node(node.index, power=node.power,
                       servers=[self.server[s].index for s in node.servers])
        for link in self.link:
            g.add_edge(link.nodeindex[0], link.nodeindex[1], key=link.index, index=link.index,
                       bandwidth=link.bandwidth, power=link.power, delay=link.delay)
        return g

    def draw_network(self, edge_label=False):
        """Draws the network using NetworkX, labelling links with their bandwidth if asked."""
        plt.figure()
        g = nx.Graph(self.to_networkx())
        pos = nx.fruchterman_reingold_layout(g)
        colomap = [[0.8, 0.5, 0.5] if self.node[n].servers else [0.5, 0.8, 0.8] for n in g.nodes()]
        nx.draw(g, node_color=colomap, font_size=8, node_size=300, pos=pos, with_labels=True,
                nodelist=g.nodes())
        if edge_label:
            nx.draw_networkx_edge_labels(g, pos, edge_labels={e: g[e[0]][e[1]]["bandwidth"] for e in g.edges()})
        plt.show()

    def msg(self):
        """calls the msg method for each node, link and server to print their information."""
        for node in self.nodes:
            print('--------------------')
            node.msg()
        for link in self.link:
            print('--------------------')
            link.msg()
        for server in self.servers:
            print('--------------------')
            server.msg()

    def state(self):
        return {"nodes_state": [el.__str__() for el in self.nodes],
                "links_state": [el.__str__() for el in self.link],
                "servers_state": [el.__str__() for el in self.servers]}
