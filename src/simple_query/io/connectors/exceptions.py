"""Driver exceptions raised by connector adapters."""


class DriverError(Exception):
    """Raised when the underlying driver fails to execute a statement."""


class PreparationError(DriverError):
    """Raised when a statement cannot be prepared or a parameter cannot be bound."""

    default_message = (
        "Error preparing SQL statement. Please verify the syntax and parameters."
    )

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)
