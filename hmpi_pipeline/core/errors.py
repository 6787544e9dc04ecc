"""
Errors raised by the normalization and scoring core.
"""


class InvalidInputError(ValueError):
    """Raised when a caller passes a value that is not a row or a batch."""

    def __init__(self, field_name: str, message: str):
        self.field_name = field_name
        self.message = message
        super().__init__(f"{field_name}: {message}")
