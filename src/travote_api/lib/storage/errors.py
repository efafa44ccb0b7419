"""Storage and deserialization error types."""


class StorageError(Exception):
    """Raised when a DynamoDB operation fails.

    Args:
        operation: Name of the failing operation (e.g. ``"Scan"``).
        table: Table the operation targeted.
        message: Human-readable error description.
        code: Optional AWS error code.
    """

    def __init__(self, operation: str, table: str, message: str, code: str | None = None) -> None:
        self.operation = operation
        self.table = table
        self.message = message
        self.code = code
        super().__init__(f"{operation} on {table}: {message}")


class ItemNotFoundError(StorageError):
    """Raised when a conditional write targets an item that does not exist."""


class DeserializationError(Exception):
    """Raised when a stored item does not match the expected record shape."""
