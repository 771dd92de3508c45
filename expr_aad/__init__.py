# expr_aad/__init__.py
# Expression graphs over named leaves: values and first-order partial derivatives

from .core.errors import ExpressionError, UnknownVariable, SharedNode, EvaluationMismatch
from .core.node import Node, Leaf, Operator, Sum, Product
from .core.evaluation import Evaluation
from .core.engine import (
    annotate,
    evaluate,
    compute_value,
    derivative_over,
    contains,
)
from .core.seeds import grads, gradient, value

# `+` / `*` on nodes
from . import ops
from .ops import add, mul

__all__ = [
    # Nodes
    'Node',
    'Leaf',
    'Operator',
    'Sum',
    'Product',
    # Errors
    'ExpressionError',
    'UnknownVariable',
    'SharedNode',
    'EvaluationMismatch',
    # Engine
    'Evaluation',
    'annotate',
    'evaluate',
    'compute_value',
    'derivative_over',
    'contains',
    'grads',
    'gradient',
    'value',
    # Assembly
    'add',
    'mul',
]
