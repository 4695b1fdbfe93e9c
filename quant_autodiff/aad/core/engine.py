# aad/core/engine.py
from __future__ import annotations

import logging

import numpy as np

from .gradient import Gradient
from .var import Variable

logger = logging.getLogger(__name__)


def accumulate(output: Variable) -> Gradient:
    """
    Run a single reverse pass from `output` and return the adjoint of every
    node on its graph.

    The tape is recorded in construction order, so every node appears after
    its parents. Walking the indices from the output down to 0 therefore
    visits a node only once all of its consumers have pushed their adjoint
    into it, and one linear sweep gives the full gradient:

        adj[k] = 1                                    (dy/dy)
        for i = k .. 0:
            for (p, d) in node[i].parents:
                adj[p] += adj[i] * d

    Returns
    -------
    Gradient with len(graph) entries (the arena size at call time). Entries at
    leaf indices are dy/dx for those leaves; other entries are intermediate
    adjoints.
    """
    if not isinstance(output, Variable):
        raise TypeError(f"accumulate expects a Variable, got {type(output)}")
    graph = output.graph
    nodes = graph.nodes
    n = len(nodes)
    k = output.index

    adj = [0.0] * n
    adj[k] = 1.0
    skip_zero = graph.config.skip_zero_adjoints

    # Backward sweep
    for i in range(k, -1, -1):
        a = adj[i]
        if skip_zero and a == 0.0:
            continue  # nothing to propagate
        for p, local_partial in nodes[i].parents:
            adj[p] += a * local_partial

    logger.debug(f"Reverse sweep on graph #{graph.graph_id}: output node {k}, {n} nodes")
    return Gradient(np.asarray(adj, dtype=np.float64), graph.graph_id)
