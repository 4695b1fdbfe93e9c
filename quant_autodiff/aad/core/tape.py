# aad/core/tape.py
from __future__ import annotations

import itertools
import logging
import math
from numbers import Real
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import AADConfig, get_config
from .node import Node

logger = logging.getLogger(__name__)

_graph_ids = itertools.count(1)


class Graph:
    """
    Append-only tape of Nodes, recorded in forward (construction) order.

    A node's index is its position on the tape; parents are always recorded
    before their children, so the tape order is already a topological order
    and the reverse sweep can simply walk it backwards.

    The graph is meant to be built and swept by a single thread. Variables
    only hold a reference to it and append through `push`.

        g = Graph()
        x, y = g.vars([1.0, 2.0])
        z = x * y + x.sin()
        grad = z.accumulate()
        grad.wrt(x), grad.wrt([x, y])
    """

    def __init__(self, config: Optional[AADConfig] = None):
        self.graph_id = next(_graph_ids)
        self.config = config if config is not None else get_config()
        self._nodes: List[Node] = []
        self.non_finite_count = 0
        logger.debug(f"Created graph #{self.graph_id} ({self.config})")

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self):
        return f"Graph(id={self.graph_id}, nodes={len(self._nodes)})"

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Read-only snapshot of the recorded nodes."""
        return tuple(self._nodes)

    def node(self, index: int) -> Node:
        return self._nodes[index]

    def push(self, value, parents: Sequence[Tuple[int, float]] = (), op_tag: str = "leaf") -> int:
        """
        Append a Node(op_tag, value, parents) to the tape and return its index.
        `parents` is a sequence of (parent_index, local_partial).
        """
        value = float(value)
        if self.config.check_finite and not math.isfinite(value):
            self.non_finite_count += 1
            if self.non_finite_count == 1:
                logger.warning(
                    f"Graph #{self.graph_id}: non-finite value {value} recorded "
                    f"by '{op_tag}' at node {len(self._nodes)}"
                )
        self._nodes.append(Node(op_tag=op_tag, value=value,
                                parents=tuple((int(i), float(d)) for i, d in parents)))
        return len(self._nodes) - 1

    def var(self, value) -> "Variable":
        """Create a leaf variable holding `value`."""
        from .var import Variable
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
            raise TypeError(f"Graph.var only accepts real scalars, but got {type(value)}")
        index = self.push(value, (), "leaf")
        return Variable(self, index, self._nodes[index].value)

    def vars(self, values: Iterable) -> List["Variable"]:
        """Create one leaf per element of `values`, in order."""
        return [self.var(v) for v in values]

