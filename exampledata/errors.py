"""Exception types raised by exampledata."""


class InvalidInputError(ValueError):
    """Raised when a size, table or file does not fit the example schema."""
