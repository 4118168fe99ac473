from core_domain.exceptions import ValidationError


def require_name(value: str, label: str, field: str) -> str:
    """Returns the name unchanged, or raises if it is empty or whitespace only."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty.", field=field)
    return value
