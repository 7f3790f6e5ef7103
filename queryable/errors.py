class QueryError(Exception):
    """base class for errors raised by queryable itself"""


class EmptySequenceError(QueryError, ValueError):
    """an operator that needs at least one element got an empty sequence"""


class UnsupportedKeyError(QueryError, TypeError):
    """a key selector produced a value of a type the operator cannot group on"""

    def __init__(self, key: object, allowed: tuple):
        self.key = key
        names = ", ".join(t.__name__ for t in allowed)
        super().__init__(f"group key must be one of ({names}), got {type(key).__name__}: {key!r}")
