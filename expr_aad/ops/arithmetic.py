# expr_aad/ops/arithmetic.py
from typing import Optional
from ..core.node import Node, Sum, Product


def add(x: Node, y: Node, name: Optional[str] = None) -> Sum:
    return Sum(x, y, name=name)


def mul(x: Node, y: Node, name: Optional[str] = None) -> Product:
    return Product(x, y, name=name)


def _binary(x, y, op):
    # leaves must be named, so bare numbers are not promoted
    if not isinstance(x, Node) or not isinstance(y, Node):
        return NotImplemented
    return op(x, y)

# Bind Python operators to Node
Node.__add__  = lambda self, other: _binary(self, other, add)
Node.__radd__ = lambda self, other: _binary(other, self, add)
Node.__mul__  = lambda self, other: _binary(self, other, mul)
Node.__rmul__ = lambda self, other: _binary(other, self, mul)
