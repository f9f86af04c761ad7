from .errors import InvalidInputError


def validate_text(value, allow_empty: bool = True, name: str = 'text') -> str:
    """Return ``value`` if it is a usable string, else raise InvalidInputError."""
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be str, got {type(value).__name__}")
    if not allow_empty and not value.strip():
        raise InvalidInputError(f"{name} must not be empty")
    return value
