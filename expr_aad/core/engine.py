# expr_aad/core/engine.py
from __future__ import annotations
from typing import List, Optional, Tuple
import numpy as np

from .evaluation import Evaluation, record
from .node import Node


def _check_root(root):
    if not isinstance(root, Node):
        raise TypeError(f"expected an expression node, but got {type(root)}")


def annotate(root: Node) -> Evaluation:
    """
    Forward pass: evaluate every node of `root` once and return the side table.

    The returned Evaluation is immutable; hand it to any number of
    `derivative_over` calls (also from several threads) to avoid
    re-evaluating the tree for each query.
    """
    _check_root(root)
    return record(root)


def evaluate(root: Node) -> Tuple[List[str], np.float64]:
    """Return (leaf names in left-to-right order, value) of `root`."""
    evaluation = annotate(root)
    return list(evaluation.names), evaluation.value


def compute_value(root: Node) -> np.float64:
    return annotate(root).value


def contains(root: Node, name: str) -> bool:
    _check_root(root)
    return root.contains(name)


def derivative_over(root: Node, name: str,
                    evaluation: Optional[Evaluation] = None) -> np.float64:
    """
    Partial derivative of `root` w.r.t. the leaf called `name`.

    Args:
        root:       expression to differentiate.
        name:       leaf name.
        evaluation: result of `annotate` on `root` (or on a tree containing it).
                    If omitted, a fresh forward pass is run first, so sibling
                    values used by the product rule are never stale.

    Raises:
        UnknownVariable:    no leaf in `root` is called `name`.
        EvaluationMismatch: `evaluation` was recorded for an unrelated tree.
    """
    _check_root(root)
    if evaluation is None and root.contains(name):
        evaluation = annotate(root)
    return root.derivative_over(name, evaluation)
