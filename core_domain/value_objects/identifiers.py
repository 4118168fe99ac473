from dataclasses import dataclass

from core_domain.exceptions import ValidationError


@dataclass(frozen=True)
class EmployeeId:
    """Numeric employee identifier. Ensures value is a positive int."""
    value: int

    def __post_init__(self):
        # bool is an int subclass but never a meaningful identifier
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValidationError("Employee ID must be a positive number.", field="id")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
