# aad/core/gradient.py
"""
Dense gradient vectors and the `wrt` selector.

A Gradient holds one adjoint per node of the graph it was computed on, keyed
by node index. `wrt` picks the partial derivatives with respect to any
selection of variables:

    grad.wrt(x)              -> float
    grad.wrt([x, y, x])      -> [float, float, float]   (order and repeats kept)
    grad.wrt((x, y))         -> [float, float]
    grad.wrt({"x": x})       -> {"x": float}
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Union

import numpy as np

from .errors import ForeignHandleError
from .var import Variable

Selector = Union[Variable, Sequence[Variable], Mapping[str, Variable]]


class Gradient:
    """Adjoint vector produced by one reverse sweep."""

    __slots__ = ("adjoints", "graph_id")

    def __init__(self, adjoints: np.ndarray, graph_id: int):
        self.adjoints = adjoints
        self.graph_id = graph_id

    def __len__(self) -> int:
        return len(self.adjoints)

    def __getitem__(self, index):
        return self.adjoints[index]

    def __iter__(self):
        return iter(self.adjoints)

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.adjoints
        return self.adjoints.astype(dtype)

    def __repr__(self):
        return f"Gradient(graph={self.graph_id}, {self.adjoints!r})"

    def _lookup(self, variable: Variable) -> float:
        if variable.graph.graph_id != self.graph_id:
            raise ForeignHandleError(
                f"Variable of graph #{variable.graph.graph_id} used to query a "
                f"gradient of graph #{self.graph_id}",
                expected_graph=self.graph_id, got_graph=variable.graph.graph_id,
            )
        if variable.index >= len(self.adjoints):
            raise ForeignHandleError(
                f"Variable at node {variable.index} was created after the reverse "
                f"sweep ({len(self.adjoints)} nodes)",
                expected_graph=self.graph_id, got_graph=variable.graph.graph_id,
            )
        return float(self.adjoints[variable.index])

    def wrt(self, variables: Selector) -> Union[float, List[float], Dict[str, float]]:
        """Return the derivative/s with respect to the chosen variables."""
        if isinstance(variables, Variable):
            return self._lookup(variables)
        if isinstance(variables, Mapping):
            return {name: self._lookup(_require_variable(v)) for name, v in variables.items()}
        if isinstance(variables, (list, tuple, np.ndarray)):
            return [self._lookup(_require_variable(v)) for v in variables]
        raise TypeError(f"cannot select gradient entries with {type(variables)}")


def _require_variable(v) -> Variable:
    if not isinstance(v, Variable):
        raise TypeError(f"gradient selectors must contain Variables, got {type(v)}")
    return v
