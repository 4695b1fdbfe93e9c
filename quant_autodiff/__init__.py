# quant_autodiff/__init__.py
# Reverse-mode automatic differentiation for quantitative finance

import logging

from .aad import (
    Graph, Variable, Node, Gradient, accumulate,
    grad, grads, grads_list, value,
    graph_summary, log_graph_summary,
    AADConfig, get_config, set_config,
    AADError, ForeignHandleError,
    ops,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Graph',
    'Variable',
    'Node',
    'Gradient',
    'accumulate',
    'grad',
    'grads',
    'grads_list',
    'value',
    'graph_summary',
    'log_graph_summary',
    'AADConfig',
    'get_config',
    'set_config',
    'AADError',
    'ForeignHandleError',
    'ops',
]
