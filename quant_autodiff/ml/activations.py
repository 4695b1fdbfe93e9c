"""
Activation functions.

Every function accepts a Variable (the result is recorded on its graph, so it
can be differentiated), a plain float, or a numpy array (applied elementwise).
"""

import numpy as np

from ..aad.core.var import Variable
from ..aad import ops

SQRT_2 = np.sqrt(2.0)


def _coerce(x):
    return x if isinstance(x, Variable) else np.asarray(x, dtype=float)


def sigmoid(x):
    """1 / (1 + exp(-x))"""
    x = _coerce(x)
    return ops.recip(ops.exp(-x) + 1.0)


def logistic(x):
    """
    Same function as sigmoid. For logistic regression:
        mu(x) = E[Y | X] = P(Y = 1 | X) = logistic(w^T x)
    """
    return sigmoid(x)


def identity(x):
    return x


def relu(x):
    """max(x, 0), written as (x + |x|) / 2 so Variables stay on the graph."""
    x = _coerce(x)
    return (x + ops.abs(x)) / 2.0


def gelu(x):
    """Gaussian error linear unit: 0.5 * x * (1 + erf(x / sqrt(2)))."""
    x = _coerce(x)
    return 0.5 * x * (1.0 + ops.erf(x / SQRT_2))


def tanh(x):
    return ops.tanh(_coerce(x))


def softplus(x):
    """ln(1 + exp(x))"""
    x = _coerce(x)
    return ops.ln(1.0 + ops.exp(x))


def gaussian(x):
    """exp(-x^2)"""
    x = _coerce(x)
    return ops.exp(-ops.powi(x, 2))


ACTIVATIONS = {
    "sigmoid": sigmoid,
    "identity": identity,
    "logistic": logistic,
    "relu": relu,
    "gelu": gelu,
    "tanh": tanh,
    "softplus": softplus,
    "gaussian": gaussian,
}


def get_activation(name: str):
    """Look up an activation function by name."""
    try:
        return ACTIVATIONS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown activation '{name}'. Available: {sorted(ACTIVATIONS)}") from None
