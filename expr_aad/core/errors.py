# expr_aad/core/errors.py


class ExpressionError(Exception):
    """Base class for errors raised while building or querying an expression graph."""


class UnknownVariable(ExpressionError, LookupError):
    """
    Raised by a derivative query for a name that no reachable leaf owns.

    Attributes
    ----------
    name : str
        The leaf name that was requested.
    """

    def __init__(self, name: str):
        super().__init__(f"Not found: {name!r}")
        self.name = name


class SharedNode(ExpressionError, ValueError):
    """Raised when the same node object would appear twice in one expression."""

    def __init__(self, node):
        self.node = node
        super().__init__(
            f"{node.describe()} appears in both operands; "
            "build a separate node instead of reusing it"
        )


class EvaluationMismatch(ExpressionError, ValueError):
    """Raised when an Evaluation that did not visit a node is used to query it."""
