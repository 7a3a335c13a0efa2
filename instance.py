#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
An instance of the VNF placement problem.

Its only job is to transfer values from an instance definition to Python, to
validate them and to build the physical network they describe.
"""
import logging
import math

from network import Network
from node import Node
from reader import InstanceFormatError, InstanceReader
from service_chain import Component, ServiceChain, VnfDemand
from util import check_array, check_matrix

logger = logging.getLogger(__name__)

NETWORK_CONF_TAG = "[Network:Conf] "


class NetworkConfigurationError(ValueError):
    """Raised when the instance values can't be turned into a network."""

    def __init__(self, msg):
        super().__init__(NETWORK_CONF_TAG + msg)


def _array(values):
    return None if values is None else tuple(float(v) for v in values)


def _matrix(rows):
    return None if rows is None else tuple(_array(row) for row in rows)


def _count(value):
    if not math.isfinite(value):
        raise InstanceFormatError("Count must be finite, found %r" % value)
    return int(value)


def _is_one(value):
    """ True if the value truncates to 1, non-finite values never do """
    return math.isfinite(value) and int(value) == 1


class Instance:

    def __init__(self, number_of_servers, number_of_vnfs, number_of_resources, number_of_nodes,
                 number_of_service_chains, p_max, p_min, requirements, resource_availability,
                 server_placement, service_chain, p_node, edges, vnf_demands, maximal_latency):
        self.number_of_servers = int(number_of_servers)
        """ Number of servers in network """
        self.number_of_vnfs = int(number_of_vnfs)
        """ Number of virtual network functions """
        self.number_of_resources = int(number_of_resources)
        """ Number of resources per server """
        self.number_of_nodes = int(number_of_nodes)
        """ Number of nodes in network """
        self.number_of_service_chains = int(number_of_service_chains)
        """ Number of service chains """
        self.p_max = _array(p_max)
        """ Maximum amount of power, p_max[server] """
        self.p_min = _array(p_min)
        """ Minimum amount of power consumed by each server, p_min[server] """
        self.requirements = _matrix(requirements)
        """ Requirement of each component for each resource, requirements[resource][component] """
        self.resource_availability = _matrix(resource_availability)
        """ Amount of each resource available at each server, resource_availability[resource][server] """
        self.server_placement = _matrix(server_placement)
        """ One-hot node a server is connected to, server_placement[server][node] """
        self.service_chain = _matrix(service_chain)
        """ Components of each service chain, service_chain[chain][component] """
        self.p_node = _array(p_node)
        """ Power consumption of each node """
        self.edges = _matrix(edges)
        """ Links between nodes: (node1, node2, bandwidth, power, delay), node IDs are 1-based """
        self.vnf_demands = _matrix(vnf_demands)
        """ Demanded bandwidths between two components: (component1, component2, bandwidth), IDs are 1-based """
        self.maximal_latency = _array(maximal_latency)
        """ Maximal permitted latency for each service chain """

    @classmethod
    def read_from_stream(cls, stream):
        """
        Reads all instance properties from a stream. The stream is closed on return,
        whether reading succeeded or not.

        Args:
            stream: Text or binary file object holding the instance definition.

        Returns:
            Instance: Newly read instance.

        Raises:
            InstanceFormatError: If the definition is malformed.
        """
        try:
            reader = InstanceReader(stream)
            counts = [_count(reader.single_value()) for _ in range(5)]
            p_max = reader.array()
            p_min = reader.array()
            requirements = reader.matrix()
            resource_availability = reader.matrix()
            server_placement = reader.matrix()
            service_chain = reader.matrix()
            p_node = reader.array()
            edges = reader.matrix()
            vnf_demands = reader.matrix()
            maximal_latency = reader.array()
        finally:
            stream.close()

        instance = cls(*counts, p_max, p_min, requirements, resource_availability, server_placement,
                       service_chain, p_node, edges, vnf_demands, maximal_latency)
        logger.info("Read instance: %d servers, %d VNFs, %d resources, %d nodes, %d service chains",
                    *counts)
        return instance

    @classmethod
    def read_from_file(cls, path):
        return cls.read_from_stream(open(path, 'r', encoding='utf-8'))

    def is_valid(self, strict=False):
        """
        Checks counts and table shapes. Values are only checked when the network is assembled.

        Args:
            strict (bool): Also require p_min <= p_max and non-negative requirements and demands.

        Returns:
            bool: True if instance is properly configured.
        """
        if self.number_of_servers <= 0 or self.number_of_servers <= 0 or self.number_of_vnfs <= 0 \
                or self.number_of_resources <= 0 or self.number_of_service_chains <= 0:
            return False

        # check arrays
        if not check_array(self.p_max, self.number_of_servers):
            return False
        if not check_array(self.p_min, self.number_of_servers):
            return False
        if not check_array(self.p_node, self.number_of_nodes):
            return False
        if not check_array(self.maximal_latency, self.number_of_service_chains):
            return False

        # check matrices
        if not check_matrix(self.requirements, self.number_of_resources, self.number_of_vnfs):
            return False
        if not check_matrix(self.resource_availability, self.number_of_resources, self.number_of_servers):
            return False
        if not check_matrix(self.server_placement, self.number_of_servers, self.number_of_nodes):
            return False
        if not check_matrix(self.service_chain, self.number_of_service_chains, self.number_of_vnfs):
            return False
        if not check_matrix(self.edges, -1, 5):
            return False
        if not check_matrix(self.vnf_demands, -1, 3):
            return False

        if strict:
            if any(lo > hi for lo, hi in zip(self.p_min, self.p_max)):
                return False
            if any(r < 0 for row in self.requirements for r in row):
                return False
            if any(demand[2] < 0 for demand in self.vnf_demands):
                return False
        return True

    def assemble_network(self, strict=False):
        """
        Creates the network described by this instance.

        Args:
            strict (bool): Reject servers without a node instead of leaving them out.

        Returns:
            Network: The fully assembled network.

        Raises:
            NetworkConfigurationError: On the first value that can't be used.
        """
        net = Network(self.number_of_nodes, self.number_of_servers)

        # configure nodes
        for node_index, power in enumerate(self.p_node):
            if power < 0:
                raise NetworkConfigurationError("Power consumption can't be negative")
            if not net.add_node(Node(node_index, power)):
                raise NetworkConfigurationError("Can't add any more nodes")

        # connect nodes with links
        for edge in self.edges:
            if not (math.isfinite(edge[0]) and math.isfinite(edge[1])):
                raise NetworkConfigurationError("Invalid node indexes for link: %s" % list(edge))
            n1 = int(edge[0]) - 1
            n2 = int(edge[1]) - 1
            bandwidth, power, delay = edge[2], edge[3], edge[4]

            if bandwidth < 0:
                raise NetworkConfigurationError("Bandwidth can't be negative")
            if power < 0:
                raise NetworkConfigurationError("Power consumption can't be negative")
            if delay < 0:
                raise NetworkConfigurationError("Delay can't be negative")

            if not net.add_link(n1, n2, bandwidth, power, delay):
                raise NetworkConfigurationError("Invalid node indexes for link: %s" % list(edge))

        # create servers
        for server_index in range(self.number_of_servers):
            p_min = self.p_min[server_index]
            p_max = self.p_max[server_index]
            if p_min < 0 or p_max < 0:
                raise NetworkConfigurationError("Power consumption can't be negative")

            resources = []
            for row in self.resource_availability:
                if row[server_index] < 0:
                    raise NetworkConfigurationError("Resource need can't be negative")
                resources.append(row[server_index])

            node_index = self.attached_node(server_index)
            if node_index is None:
                if strict:
                    raise NetworkConfigurationError("Server %d is not placed on any node" % server_index)
                logger.debug("Server %d is not placed on any node, leaving it out", server_index)
                continue

            if not net.connect_server(server_index, p_min, p_max, node_index, resources):
                raise NetworkConfigurationError("Server configured badly")

        logger.debug("Assembled network: %d nodes, %d links, %d servers",
                     len(net.node), len(net.link), len(net.server))
        return net

    def attached_node(self, server_index):
        """
        Returns:
            int or None: The first node marked with 1 in the server's placement row, None if there is none.
        """
        for node_index, value in enumerate(self.server_placement[server_index]):
            if _is_one(value):
                return node_index
        return None

    def components(self):
        """ One component per VNF, carrying its column of the requirements table """
        return [Component(v, tuple(row[v] for row in self.requirements))
                for v in range(self.number_of_vnfs)]

    def service_chains(self):
        """
        Builds the service chains from the membership table.

        Returns:
            list: One ServiceChain per chain, its components in component order.
        """
        components = self.components()
        chains = []
        for chain_index, membership in enumerate(self.service_chain):
            chain = ServiceChain(self.maximal_latency[chain_index])
            for v, member in enumerate(membership):
                if _is_one(member):
                    chain.add_component(components[v])
            chains.append(chain)
        return chains

    def demands(self):
        """ Bandwidth demands between components, with 0-based component IDs """
        return [VnfDemand(int(d[0]) - 1, int(d[1]) - 1, d[2]) for d in self.vnf_demands]
