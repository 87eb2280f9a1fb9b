class InventoryError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(InventoryError):
    pass


class ValidationFailed(InventoryError):
    """A field, reference or uniqueness rule was violated."""
