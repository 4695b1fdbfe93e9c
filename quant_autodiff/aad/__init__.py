# aad/__init__.py
# Reverse-mode Automatic Adjoint Differentiation on a recorded graph

from .core import (
    AADConfig, get_config, set_config,
    AADError, ForeignHandleError,
    Node, Graph, Variable, Gradient,
    accumulate,
    grad, grads, grads_list, value,
)
from . import ops
from .core.graph_utils import graph_summary, log_graph_summary

__all__ = [
    # Core
    'Graph',
    'Variable',
    'Node',
    'Gradient',
    'accumulate',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    'graph_summary',
    'log_graph_summary',
    # Config / errors
    'AADConfig',
    'get_config',
    'set_config',
    'AADError',
    'ForeignHandleError',
    # Elementary functions
    'ops',
]
