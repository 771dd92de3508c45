# expr_aad/ops/__init__.py

# Ensure operator overloading is registered
from . import arithmetic

from .arithmetic import add, mul

__all__ = ["add", "mul"]
