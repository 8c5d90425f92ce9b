class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument it cannot accept."""


class RecordNotFoundError(KeyError):
    """Raised when indexing a store by an identifier it does not hold."""


__all__ = ["InvalidArgumentError", "RecordNotFoundError"]
