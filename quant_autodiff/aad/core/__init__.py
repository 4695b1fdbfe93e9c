# aad/core/__init__.py

"""
Core public API for the AAD package.

Exports:
    Graph             : Append-only tape of recorded operations; creates leaf Variables.
    Variable          : Handle to one node, with the arithmetic operator overloads.
    Gradient          : Dense adjoint vector returned by a reverse sweep; `wrt` selects entries.
    accumulate        : Run a single reverse pass from an output Variable.
    grad, grads, grads_list, value : one-call differentiation helpers.
    AADConfig, get_config, set_config : runtime configuration.
    AADError, ForeignHandleError      : misuse errors.
"""

from .config import AADConfig, get_config, set_config
from .errors import AADError, ForeignHandleError
from .node import Node
from .tape import Graph
from .var import Variable
from .gradient import Gradient
from .engine import accumulate
from .seeds import grad, grads, grads_list, value

__all__ = [
    "AADConfig", "get_config", "set_config",
    "AADError", "ForeignHandleError",
    "Node", "Graph", "Variable", "Gradient",
    "accumulate",
    "grad", "grads", "grads_list", "value",
]
