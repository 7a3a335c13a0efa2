#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Link entity of the physical network.
"""


class Link:

    def __init__(self, index, bandwidth, power, delay, a_t_b):
        self.index = index
        """ Link index/ID, in registration order """
        self.bandwidth = bandwidth
        """ The bandwidth capacity of the link """
        self.power = power
        """ Power consumed by the link """
        self.delay = delay
        """ The delay of the link """
        self.nodeindex = [int(a_t_b[0]), int(a_t_b[1])]
        """ The indices of the two nodes connected by the link, extracted from the a_t_b parameter """

    def __str__(self):
        return str({'link': self.index, 'bandwidth': self.bandwidth, 'power': self.power,
                    'delay': self.delay, 'nodeindex': self.nodeindex})

    def msg(self):
        print(self.__str__())
