from typing import Optional


class ValidationError(ValueError):
    """Raised when an employee field breaks one of its invariants."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        return self.message
