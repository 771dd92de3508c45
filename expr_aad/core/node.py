# expr_aad/core/node.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import FrozenSet, List, Optional, Tuple
import logging
import numbers
import numpy as np

from .errors import SharedNode, UnknownVariable
from .evaluation import Evaluation, record

logger = logging.getLogger(__name__)

LEFT, RIGHT = 0, 1


class Node(ABC):
    """
    Shared protocol of every expression node.

    Any node, leaf or operator, can be an operand of an operator, so trees of
    arbitrary depth are built from the same three queries:

        evaluate()              -> (leaf names, value)
        derivative_over(name)   -> ∂value/∂leaf[name]
        contains(name)          -> whether a leaf called `name` is in the subtree

    Nodes are immutable once built and compare by identity.
    """

    __slots__ = ("_names", "_leaves", "__weakref__")

    op_tag: str = "node"
    precedence = float("inf")

    @property
    def children(self) -> Tuple["Node", ...]:
        return ()

    @property
    def leaf_names(self) -> FrozenSet[str]:
        """Names of all leaves in this subtree."""
        return self._names

    @property
    @abstractmethod
    def label(self) -> str:
        """Diagnostic name."""

    @abstractmethod
    def describe(self) -> str:
        """Short description for log and error messages; never renders the subtree."""

    @abstractmethod
    def combine(self, *child_values) -> np.float64:
        """Value of this node given the values of its children."""

    def contains(self, name: str) -> bool:
        return name in self._names

    def evaluate(self) -> Tuple[List[str], np.float64]:
        evaluation = record(self)
        return list(evaluation.names), evaluation.value

    @abstractmethod
    def derivative_over(self, name: str, evaluation: Optional[Evaluation] = None) -> np.float64:
        """Partial derivative of this node's value w.r.t. the leaf called `name`."""

    def _evaluation_for(self, evaluation: Optional[Evaluation]) -> Evaluation:
        if evaluation is None:
            return record(self)
        # raises EvaluationMismatch when the table was recorded for another tree
        evaluation.value_of(self)
        return evaluation


class Leaf(Node):
    """
    A named constant; the base case of every expression.

    Attributes
    ----------
    value : np.float64
        Fixed scalar value.
    name  : str
        Name used to address this leaf in derivative queries. Unrelated leaves
        may share a name.
    """

    __slots__ = ("_value", "_name")

    op_tag = "leaf"

    def __init__(self, value, name: str):
        # bool is an Integral too, but never a meaningful leaf value
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"Leaf value must be a real number, but got {type(value)}")
        if not isinstance(name, str):
            raise TypeError(f"Leaf name must be a string, but got {type(name)}")
        self._value = np.float64(value)
        self._name = name
        self._names = frozenset((name,))
        self._leaves = frozenset((self,))

    @property
    def value(self) -> np.float64:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._name

    def combine(self) -> np.float64:
        return self._value

    def derivative_over(self, name: str, evaluation: Optional[Evaluation] = None) -> np.float64:
        if name != self._name:
            raise UnknownVariable(name)
        return np.float64(1.0)

    def describe(self) -> str:
        return f"leaf {self._name!r}"

    def __repr__(self):
        return f"Leaf({float(self._value)!r}, {self._name!r})"

    def __str__(self):
        return self._name


class Operator(Node):
    """
    Binary operator node owning two operand subtrees.

    Subclasses define the value rule (`combine`) and the local derivative of
    the node w.r.t. one operand (`local_partial`); the chain rule that strings
    local derivatives together lives here.
    """

    __slots__ = ("_left", "_right", "_label")

    symbol = "?"

    def __init__(self, left: Node, right: Node, name: Optional[str] = None):
        for operand in (left, right):
            if not isinstance(operand, Node):
                raise TypeError(
                    f"{type(self).__name__} operands must be expression nodes, "
                    f"but got {type(operand)}"
                )
        if name is not None and not isinstance(name, str):
            raise TypeError(f"Operator name must be a string, but got {type(name)}")

        # every node has at least one leaf, so a reused subtree shows up here
        shared = left._leaves & right._leaves
        if shared:
            raise SharedNode(next(iter(shared)))

        self._left = left
        self._right = right
        self._label = name
        self._names = left.leaf_names | right.leaf_names
        self._leaves = left._leaves | right._leaves

    @property
    def left(self) -> Node:
        return self._left

    @property
    def right(self) -> Node:
        return self._right

    @property
    def children(self) -> Tuple[Node, Node]:
        return (self._left, self._right)

    @property
    def label(self) -> str:
        return self._label if self._label is not None else str(self)

    @abstractmethod
    def local_partial(self, side: int, evaluation: Evaluation) -> np.float64:
        """∂(this node)/∂(operand on `side`), using values recorded in `evaluation`."""

    def derivative_over(self, name: str, evaluation: Optional[Evaluation] = None) -> np.float64:
        if not self.contains(name):
            raise UnknownVariable(name)
        evaluation = self._evaluation_for(evaluation)

        # Walk down to the owning leaf, multiplying local partials on the way.
        # The left operand is checked first, so on a repeated name the leftmost
        # leaf wins; contributions are never summed across both operands.
        coefficient = np.float64(1.0)
        node = self
        while isinstance(node, Operator):
            side = LEFT if node.left.contains(name) else RIGHT
            coefficient = coefficient * node.local_partial(side, evaluation)
            node = node.children[side]

        logger.debug("d(%s)/d(%s) = %r", self.describe(), name, coefficient)
        return coefficient * node.derivative_over(name)

    def describe(self) -> str:
        if self._label is not None:
            return f"{self.op_tag} {self._label!r}"
        return f"{self.op_tag} of {len(self._leaves)} leaves"

    def __repr__(self):
        return _render(self, repr, _call_text)

    def __str__(self):
        return _render(self, str, _infix_text)


def _infix_text(node: Operator, *operands: str) -> str:
    parts = []
    for child, text in zip(node.children, operands):
        if isinstance(child, Operator) and child.precedence < node.precedence:
            parts.append(f"({text})")
        else:
            parts.append(text)
    return f" {node.symbol} ".join(parts)


def _call_text(node: Operator, *operands: str) -> str:
    args = ", ".join(operands)
    if node._label is not None:
        args += f", name={node._label!r}"
    return f"{type(node).__name__}({args})"


def _render(root: Node, leaf_text, operator_text) -> str:
    """
    Format `root` bottom-up.

    Same explicit-stack post-order as `evaluation.record`, so rendering is not
    limited by the recursion depth either. Operand strings are dropped once
    their parent has been formatted.
    """
    text = {}
    stack = [(root, False)]
    while stack:
        node, processed = stack.pop()
        if processed:
            if node.children:
                text[node] = operator_text(node, *(text.pop(c) for c in node.children))
            else:
                text[node] = leaf_text(node)
        else:
            stack.append((node, True))
            for child in reversed(node.children):
                stack.append((child, False))
    return text[root]


class Sum(Operator):
    """left + right; ∂/∂operand = 1."""

    __slots__ = ()

    op_tag = "sum"
    symbol = "+"
    precedence = 1

    def combine(self, a, b) -> np.float64:
        return a + b

    def local_partial(self, side: int, evaluation: Evaluation) -> np.float64:
        return np.float64(1.0)


class Product(Operator):
    """
    left * right.

    Product rule with disjoint operands: ∂(f·g)/∂x = g·∂f/∂x when x occurs only
    in f, so the local partial w.r.t. one operand is the recorded value of the
    other one.
    """

    __slots__ = ()

    op_tag = "product"
    symbol = "*"
    precedence = 2

    def combine(self, a, b) -> np.float64:
        return a * b

    def local_partial(self, side: int, evaluation: Evaluation) -> np.float64:
        sibling = self._right if side == LEFT else self._left
        return evaluation.value_of(sibling)
