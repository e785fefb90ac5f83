"""Small argument helpers shared by the codec modules."""


def require_char(name: str, value: str) -> str:
    """Validate that *value* is a single character.

    Args:
        name: Parameter name used in the error message.
        value: The value to check.

    Returns:
        The value unchanged.

    Raises:
        ValueError: If *value* is not a ``str`` of length 1.
    """
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value
