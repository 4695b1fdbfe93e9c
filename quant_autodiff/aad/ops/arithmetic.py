# aad/ops/arithmetic.py
from numbers import Integral, Real

import numpy as np

from ..core.var import Variable


def _plain(x):
    """Numeric form of a non-Variable operand: np.float64 scalar or float64 ndarray."""
    if isinstance(x, (bool, np.bool_)):
        raise TypeError(f"unsupported operand type {type(x)}")
    if isinstance(x, Real):
        return np.float64(x)
    if isinstance(x, (list, tuple, np.ndarray)):
        return np.asarray(x, dtype=np.float64)
    raise TypeError(f"unsupported operand type {type(x)}")


def _scalar(x):
    """Numeric form of the constant side of a Variable <op> constant expression."""
    v = _plain(x)
    if np.ndim(v) != 0:
        raise TypeError("a Variable can only be combined with scalars, not arrays")
    return np.float64(v)


def _record(graph, value, parents, tag):
    index = graph.push(value, parents, tag)
    return Variable(graph, index, value)


def _unary(x, f, dfdx, tag):
    """
    Generic unary primitive:
      - plain input: evaluate f with numpy and return the number, nothing recorded
      - Variable: out = f(a), local partial dfdx(a, out), one node pushed
    Numeric domain errors propagate as NaN/Inf instead of raising.
    """
    if not isinstance(x, Variable):
        with np.errstate(all="ignore"):
            return f(_plain(x))
    a = x.value
    with np.errstate(all="ignore"):
        out = np.float64(f(a))
        partial = dfdx(a, out)
    return _record(x.graph, out, [(x.index, partial)], tag)


def _binary(x, y, f, dfdx, dfdy, tag):
    """
    Generic binary primitive:
      - computes out = f(a, b) on forward values
      - pushes a Node with the local partials of the Variable operand(s);
        a constant operand is only folded into the forward value
    """
    x_var = isinstance(x, Variable)
    y_var = isinstance(y, Variable)
    if not (x_var or y_var):
        with np.errstate(all="ignore"):
            return f(_plain(x), _plain(y))
    if x_var and y_var:
        x.check_same_graph(y)
    a = x.value if x_var else _scalar(x)
    b = y.value if y_var else _scalar(y)

    parents = []
    with np.errstate(all="ignore"):
        out = np.float64(f(a, b))
        if x_var:
            parents.append((x.index, dfdx(a, b)))
        if y_var:
            parents.append((y.index, dfdy(a, b)))
    graph = x.graph if x_var else y.graph
    return _record(graph, out, parents, tag)


def add(x, y): return _binary(x, y, lambda a,b:a+b, lambda a,b:1.0,        lambda a,b:1.0,              "add")
def sub(x, y): return _binary(x, y, lambda a,b:a-b, lambda a,b:1.0,        lambda a,b:-1.0,             "sub")
def mul(x, y): return _binary(x, y, lambda a,b:a*b, lambda a,b:b,          lambda a,b:a,                "mul")
def div(x, y): return _binary(x, y, lambda a,b:a/b, lambda a,b:1.0/b,      lambda a,b:-a/np.square(b),  "div")

def neg(x):   return _unary(x, np.negative,   lambda a,y:-1.0,              "neg")
def recip(x): return _unary(x, np.reciprocal, lambda a,y:-1.0/np.square(a), "recip")

def abs(x):
    """|x|; the partial is sign(x), taken as 0 at x == 0."""
    return _unary(x, np.abs, lambda a,y:np.sign(a), "abs")


def powi(x, n):
    """
    Integer power x**n:
      ∂out/∂x = n * x^(n-1)
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, Integral):
        raise TypeError(f"powi expects an integer exponent, got {type(n)}")
    n = int(n)
    return _unary(x, lambda a: np.power(a, float(n)), lambda a,y: n * np.power(a, float(n - 1)), "powi")


def _dpow_dexponent(a, p):
    # ∂(a^p)/∂p = a^p * ln(a); the limit is 0 wherever a^p vanishes
    y = np.power(a, p)
    return 0.0 if y == 0.0 else y * np.log(a)


def powf(x, p):
    """
    Real power x**p. Either side may be a Variable:
      ∂out/∂x = p * x^(p-1)
      ∂out/∂p = x^p * log(x)   (NaN for x < 0, 0 where x^p == 0)
    """
    return _binary(x, p, np.power, lambda a,b: b * np.power(a, b - 1.0), _dpow_dexponent, "powf")


def pow(x, y):
    """`x ** y`: integer exponents on a Variable base use powi, everything else powf."""
    if isinstance(x, Variable) and isinstance(y, Integral) and not isinstance(y, (bool, np.bool_)):
        return powi(x, y)
    return powf(x, y)
