from .activations import (
    sigmoid, identity, logistic, relu, gelu, tanh, softplus, gaussian,
    ACTIVATIONS, get_activation,
)

__all__ = [
    "sigmoid", "identity", "logistic", "relu", "gelu", "tanh", "softplus", "gaussian",
    "ACTIVATIONS", "get_activation",
]
