# aad/core/var.py
from __future__ import annotations

import numpy as np

from .errors import ForeignHandleError


class Variable:
    """
    Handle to one node of a Graph.

    Attributes
    ----------
    value : np.float64
        Forward (primal) value of the node, cached on the handle.
    index : int
        Position of the node on the graph's tape.
    graph : Graph
        The graph the node lives on; used to record new nodes.

    Variables are immutable and cheap to copy. They are created by
    `Graph.var` / `Graph.vars` or as the result of an operation on other
    Variables; combining Variables of two different graphs raises
    ForeignHandleError.
    """

    __slots__ = ("graph", "index", "value")

    __array_ufunc__ = None  # numpy scalars and arrays defer to the reflected Variable op

    def __init__(self, graph, index: int, value):
        self.graph = graph
        self.index = index
        self.value = np.float64(value)

    @property
    def graph_id(self) -> int:
        return self.graph.graph_id

    def __repr__(self):
        return f"Variable(value={self.value!r}, index={self.index}, graph={self.graph.graph_id})"

    def __float__(self):
        return float(self.value)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def check_same_graph(self, other: "Variable"):
        if other.graph is not self.graph:
            raise ForeignHandleError(
                f"Cannot combine a Variable of graph #{self.graph.graph_id} "
                f"with a Variable of graph #{other.graph.graph_id}",
                expected_graph=self.graph.graph_id, got_graph=other.graph.graph_id,
            )

    def accumulate(self):
        """Run the reverse sweep from this variable; returns a Gradient."""
        from .engine import accumulate
        return accumulate(self)

    # Comparisons look at forward values only and record nothing
    def __lt__(self, other):
        return bool(self.value < _value_of(other))

    def __le__(self, other):
        return bool(self.value <= _value_of(other))

    def __gt__(self, other):
        return bool(self.value > _value_of(other))

    def __ge__(self, other):
        return bool(self.value >= _value_of(other))

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        return self

    def __abs__(self):
        from ..ops.arithmetic import abs
        return abs(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    # Elementary functions, also available as free functions in `aad.ops`
    def recip(self):
        from ..ops.arithmetic import recip
        return recip(self)

    def abs(self):
        from ..ops.arithmetic import abs
        return abs(self)

    def powi(self, n: int):
        from ..ops.arithmetic import powi
        return powi(self, n)

    def powf(self, p):
        from ..ops.arithmetic import powf
        return powf(self, p)

    def sqrt(self):
        from ..ops.transcendental import sqrt
        return sqrt(self)

    def cbrt(self):
        from ..ops.transcendental import cbrt
        return cbrt(self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def exp2(self):
        from ..ops.transcendental import exp2
        return exp2(self)

    def exp_m1(self):
        from ..ops.transcendental import exp_m1
        return exp_m1(self)

    def ln(self):
        from ..ops.transcendental import ln
        return ln(self)

    def ln_1p(self):
        from ..ops.transcendental import ln_1p
        return ln_1p(self)

    def log2(self):
        from ..ops.transcendental import log2
        return log2(self)

    def log10(self):
        from ..ops.transcendental import log10
        return log10(self)

    def sin(self):
        from ..ops.transcendental import sin
        return sin(self)

    def cos(self):
        from ..ops.transcendental import cos
        return cos(self)

    def tan(self):
        from ..ops.transcendental import tan
        return tan(self)

    def asin(self):
        from ..ops.transcendental import asin
        return asin(self)

    def acos(self):
        from ..ops.transcendental import acos
        return acos(self)

    def atan(self):
        from ..ops.transcendental import atan
        return atan(self)

    def sinh(self):
        from ..ops.transcendental import sinh
        return sinh(self)

    def cosh(self):
        from ..ops.transcendental import cosh
        return cosh(self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def asinh(self):
        from ..ops.transcendental import asinh
        return asinh(self)

    def acosh(self):
        from ..ops.transcendental import acosh
        return acosh(self)

    def atanh(self):
        from ..ops.transcendental import atanh
        return atanh(self)

    def erf(self):
        from ..ops.special import erf
        return erf(self)

    def erfc(self):
        from ..ops.special import erfc
        return erfc(self)


def _value_of(x):
    return x.value if isinstance(x, Variable) else x
