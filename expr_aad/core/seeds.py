# expr_aad/core/seeds.py

#-----------------------------------------------------------------------------
# Gradients with respect to many leaves from a single forward pass: the side
# table is recorded once and every partial reads sibling values from it.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Dict, Iterable, Optional
import numpy as np

from .evaluation import Evaluation
from .engine import annotate, derivative_over
from .node import Node


def value(x: Any) -> Any:
    """Return the numeric value of a node; pass through plain numbers unchanged."""
    return annotate(x).value if isinstance(x, Node) else x


def grads(root: Node, evaluation: Optional[Evaluation] = None) -> Dict[str, np.float64]:
    """
    Partial derivatives of `root` w.r.t. ALL of its leaves.

    Returns
    -------
    dict {leaf name: ∂root/∂leaf}, keys in left-to-right leaf order.
    """
    if evaluation is None:
        evaluation = annotate(root)
    names = _leaf_order(root, evaluation)
    return {name: derivative_over(root, name, evaluation) for name in names}


def gradient(root: Node,
             names: Optional[Iterable[str]] = None,
             evaluation: Optional[Evaluation] = None) -> np.ndarray:
    """
    Same as grads(), but returns a float64 vector in the order of `names`
    (default: every leaf name, left to right, a repeated name listed once).

    Example
    -------
    a, b = Leaf(2.0, "a"), Leaf(4.0, "b")
    gradient(a * b, ["b", "a"]) -> array([2., 4.])
    """
    if evaluation is None:
        evaluation = annotate(root)
    if names is None:
        names = _leaf_order(root, evaluation)
    return np.array([derivative_over(root, n, evaluation) for n in names], dtype=np.float64)


def _leaf_order(root: Node, evaluation: Evaluation):
    # unique names in first-seen order; an ancestor's evaluation is restricted to this subtree
    if evaluation.root is not root:
        evaluation.value_of(root)
    return tuple(dict.fromkeys(n for n in evaluation.names if root.contains(n)))
