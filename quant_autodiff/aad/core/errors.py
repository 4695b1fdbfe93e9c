# aad/core/errors.py
"""
Exceptions raised by the AAD core.

Numeric domain problems (log of a negative number, division by zero, ...)
never raise: they propagate as NaN/Inf through values and adjoints. Only
misuse of handles is reported as an error.
"""


class AADError(Exception):
    """Base class for all AAD errors."""


class ForeignHandleError(AADError, ValueError):
    """
    A Variable was used with a Graph (or a Gradient) it does not belong to.

    Raised when two Variables from different graphs are combined, or when a
    gradient vector is queried with a Variable from another graph or one
    created after the reverse sweep was run.
    """

    def __init__(self, message: str, *, expected_graph: int = None, got_graph: int = None):
        super().__init__(message)
        self.expected_graph = expected_graph
        self.got_graph = got_graph
