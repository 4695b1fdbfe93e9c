# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape. Every helper here builds its own fresh Graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .config import AADConfig
from .tape import Graph
from .var import Variable


def value(x: Any) -> Any:
    """Return the numeric value of a Variable; pass through plain numbers unchanged."""
    return float(x.value) if isinstance(x, Variable) else x


def _run(y) -> Tuple[float, Any]:
    """(forward value, gradient or None) for the output of a user function."""
    if isinstance(y, Variable):
        return float(y.value), y.accumulate()
    # The output does not depend on any input: all partials are zero.
    return float(y), None


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Variable], Any], x0: float,
         config: Optional[AADConfig] = None) -> Tuple[float, float]:
    """
    Value and derivative of a scalar function y = f(x) at x0.

    Example
    -------
    grad(lambda x: x * x.sin(), 1.0) -> (0.8414..., 1.3817...)
    """
    g = Graph(config)
    x = g.var(x0)
    y, gradient = _run(f(x))
    return y, (gradient.wrt(x) if gradient is not None else 0.0)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Variable]], Any], inputs: Dict[str, float],
          config: Optional[AADConfig] = None) -> Tuple[float, Dict[str, float]]:
    """
    Value and gradient of a scalar function y = f(vars) w.r.t. ALL inputs
    (dict form). Performs ONE reverse pass for all ∂y/∂var.

    Parameters
    ----------
    f       : function taking a dict {name: Variable} and returning a Variable
    inputs  : dict {name: numeric}

    Returns
    -------
    (y, {name: ∂y/∂name})  # gradients in the same key order as `inputs`
    """
    g = Graph(config)
    xs = {k: g.var(v) for k, v in inputs.items()}
    y, gradient = _run(f(xs))
    if gradient is None:
        return y, {k: 0.0 for k in inputs}
    return y, gradient.wrt(xs)


def grads_list(f: Callable[[List[Variable]], Any], x0_list: Iterable[float],
               config: Optional[AADConfig] = None) -> Tuple[float, List[float]]:
    """
    Same as grads(), but the inputs are provided as a list and the partials
    come back as a list in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> (16.0, [4.0, 3.0])
    """
    g = Graph(config)
    xs = g.vars(x0_list)
    y, gradient = _run(f(xs))
    if gradient is None:
        return y, [0.0] * len(xs)
    return y, gradient.wrt(xs)
