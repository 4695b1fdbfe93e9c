"""
Graph inspection helpers: node/edge statistics and a log-friendly dump of the
recorded tape.
"""

import logging
from collections import Counter
from typing import Dict, Optional

import numpy as np

from .tape import Graph

_logger = logging.getLogger(__name__)


def graph_summary(graph: Graph) -> Dict:
    """
    Statistics of a recorded graph.

    Returns:
        dict with node/edge/leaf counts, fan-in/fan-out figures and a count
        of nodes per operation tag
    """
    nodes = graph.nodes
    n_nodes = len(nodes)
    if n_nodes == 0:
        return {
            'nodes': 0, 'edges': 0, 'leaves': 0,
            'max_fan_in': 0, 'max_fan_out': 0, 'avg_fan_out': 0.0,
            'operations': {},
        }

    fan_ins = [len(node.parents) for node in nodes]

    # fan-out: how many recorded edges use each node as a parent
    fan_outs = [0] * n_nodes
    for node in nodes:
        for parent, _ in node.parents:
            fan_outs[parent] += 1

    op_counter = Counter(node.op_tag for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for node in nodes if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter),
    }


def log_graph_summary(graph: Graph, detailed: bool = False,
                      logger: Optional[logging.Logger] = None) -> Dict:
    """
    Log the summary of `graph` at INFO level and return it.

    Args:
        graph: Graph to inspect
        detailed: also log one line per node (graphs of up to 100 nodes)
        logger: logger to write to (defaults to this module's logger)
    """
    log = logger or _logger
    summary = graph_summary(graph)
    if summary['nodes'] == 0:
        log.info(f"Graph #{graph.graph_id}: empty computation graph")
        return summary

    log.info(
        f"Graph #{graph.graph_id}: {summary['nodes']:,} nodes, {summary['edges']:,} edges, "
        f"{summary['leaves']} leaves, max fan-in {summary['max_fan_in']}, "
        f"max fan-out {summary['max_fan_out']}, avg fan-out {summary['avg_fan_out']:.2f}"
    )
    for op_type, count in Counter(summary['operations']).most_common(10):
        pct = 100.0 * count / summary['nodes']
        log.info(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and summary['nodes'] <= 100:
        for i, node in enumerate(graph.nodes):
            parent_info = ", ".join(f"Node{p}" for p, _ in node.parents)
            log.info(f"Node {i:3d}: {node.op_tag:12s} = {node.value:.6g} <- [{parent_info}]")

    return summary
