# expr_aad/core/__init__.py

"""
Core public API for expression graphs.

Exports:
    Node, Leaf, Operator, Sum, Product : expression node types.
    Evaluation      : side table produced by one forward pass.
    annotate        : run a forward pass and return its Evaluation.
    evaluate        : (leaf names, value) of an expression.
    compute_value   : value of an expression.
    derivative_over : partial derivative w.r.t. one named leaf.
    contains        : whether a leaf name occurs in an expression.
    grads, gradient : partials w.r.t. many leaves from one forward pass.
    value           : numeric value of a node or plain number.
"""

from .errors import ExpressionError, UnknownVariable, SharedNode, EvaluationMismatch
from .node import Node, Leaf, Operator, Sum, Product
from .evaluation import Evaluation
from .engine import annotate, evaluate, compute_value, derivative_over, contains
from .seeds import grads, gradient, value
