# expr_aad/core/evaluation.py
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple
import logging
import numpy as np

from .errors import EvaluationMismatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """
    Result of a forward pass over an expression tree.

    Attributes
    ----------
    root   : Node
        The node the pass started from.
    names  : Tuple[str, ...]
        Leaf names in the order they were visited (left operand before right).
    value  : np.float64
        Value of `root`.
    values : Mapping[Node, np.float64]
        Read-only side table holding the value of every node in the tree.
        Derivative queries read sibling values from here instead of recomputing them.
    """
    root: Any
    names: Tuple[str, ...]
    value: np.float64
    values: Mapping[Any, np.float64]

    def value_of(self, node) -> np.float64:
        try:
            return self.values[node]
        except KeyError:
            raise EvaluationMismatch(
                f"{node.describe()} was not visited by the evaluation of {self.root.describe()}"
            ) from None

    def covers(self, node) -> bool:
        return node in self.values


def record(root) -> Evaluation:
    """
    Evaluate `root` in post-order and return the full side table.

    The walk uses an explicit stack so that tree depth is not limited by the
    interpreter's recursion limit. Every node is visited exactly once.
    """
    values: Dict[Any, np.float64] = {}
    names = []

    stack = [(root, False)]  # (node, children already pushed)
    while stack:
        node, processed = stack.pop()
        if processed:
            if node.op_tag == "leaf":
                names.append(node.name)
            values[node] = node.combine(*(values[c] for c in node.children))
        else:
            stack.append((node, True))
            # reversed so the left operand is finished first
            for child in reversed(node.children):
                stack.append((child, False))

    logger.debug("evaluated %d nodes of %s: value=%r", len(values), root.describe(), values[root])
    return Evaluation(
        root=root,
        names=tuple(names),
        value=values[root],
        values=MappingProxyType(values),
    )
