class InvalidGlobalId(ValueError):
    """Raised when an opaque global id is not a well-formed encoding."""


class InvalidPaginationArgument(ValueError):
    """Raised when `first` or `last` is negative."""


class StoreFailure(RuntimeError):
    """Raised by resolvers when the underlying todo store fails."""
