#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Loads the instance named in parameters.json, validates it, assembles its
network and saves the network state.
"""
import json
import logging
import os
import sys
from timeit import default_timer as timer

from termcolor import colored

import util
from instance import Instance

logger = logging.getLogger(__name__)


def load_parameters(path='parameters.json'):
    # Opening JSON file
    with open(path, 'r') as openfile:
        return json.load(openfile)


def chain_hosts(chain, net):
    """
    Lists, for each component of a chain, the servers whose resources cover its requirements.

    Returns:
        list: (component, [server index]) pairs in chain order.
    """
    return [(component, [s.index for s in net.servers if s.can_host(component.requirements)])
            for component in chain]


def main(parameters_path='parameters.json'):
    json_object = load_parameters(parameters_path)

    INSTANCE_PATH = json_object['INSTANCE_PATH']
    OUTPUT_PATH = json_object['OUTPUT_PATH']
    STRICT = json_object.get('STRICT', False)
    DRAW = json_object.get('DRAW', False)

    logging.basicConfig(level=json_object.get('LOG_LEVEL', 'INFO'),
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    util.seed(json_object.get('SEED', util.SEED))

    start = timer()
    instance = Instance.read_from_file(INSTANCE_PATH)
    if not instance.is_valid(strict=STRICT):
        print(colored('Instance %s is not valid' % INSTANCE_PATH, 'red'))
        return 1

    net = instance.assemble_network(strict=STRICT)
    print(colored('Network assembled in %.3fs' % (timer() - start), 'green'))
    print("nodes", len(net.nodes), "links", len(net.links), "servers", len(net.servers))
    for chain_index, chain in enumerate(instance.service_chains()):
        print("chain", chain_index, "latency", chain.latency, "components", [c.index for c in chain])
        for component, servers in chain_hosts(chain, net):
            print("  component", component.index, "fits on servers", servers)

    os.makedirs(OUTPUT_PATH, exist_ok=True)
    state_path = os.path.join(OUTPUT_PATH, 'network_state.json')
    with open(state_path, 'w') as output:
        json.dump(net.state(), output, indent=2)
    logger.info("Network state saved to %s", state_path)

    if DRAW:
        net.draw_network(edge_label=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
