"""Host-level failures.

Language-level failures are ``EvaluationError`` objects (see ``object.py``)
and flow through the evaluator as ordinary values. The exceptions below
are reserved for conditions the running program cannot observe.
"""


class MonkeyError(Exception):
    """Base class for interpreter faults raised to the host."""
    pass


class EvaluationDepthError(MonkeyError):
    """Evaluation nested deeper than the configured ``max_depth``."""

    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(f"Maximum evaluation depth exceeded: {depth} > {limit}")


class UnsupportedNodeError(MonkeyError):
    """Raised in strict mode when a node outside the vocabulary is evaluated."""

    def __init__(self, node):
        self.node = node
        super().__init__(f"Unsupported node type: {type(node).__name__}")


class UnhashableKeyError(MonkeyError, TypeError):
    """A non-hashable object was used as a hash key."""

    def __init__(self, obj):
        self.obj = obj
        kind = obj.type() if hasattr(obj, "type") else type(obj).__name__
        super().__init__(f"Unusable as hash key: {kind}")
