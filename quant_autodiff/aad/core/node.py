# aad/core/node.py
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Node:
    """
    One node on the tape produced by a primitive operation.

    Attributes
    ----------
    op_tag : str
        Debug tag (e.g., "add", "mul", "leaf").
    value  : float
        Forward result, evaluated eagerly when the node is recorded.
    parents: Tuple[Tuple[int, float], ...]
        (parent_index, local_partial) pairs: empty for a leaf, one pair for a
        unary op, two for a binary op. Every parent_index is smaller than the
        index of this node.
    """
    op_tag: str
    value: float
    parents: Tuple[Tuple[int, float], ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.parents
