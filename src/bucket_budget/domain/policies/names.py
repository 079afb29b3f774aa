"""Naming rules for user supplied labels."""

MAX_NAME_LENGTH = 120


def is_valid_name(name: str | None) -> bool:
    """Return True when name is a non-blank label of reasonable length.

    Args:
        name: Raw name supplied by the caller.

    Returns:
        bool: Whether the name can label a stream or category.
    """
    if not isinstance(name, str):
        return False
    cleaned = name.strip()
    return bool(cleaned) and len(cleaned) <= MAX_NAME_LENGTH


__all__ = ["MAX_NAME_LENGTH", "is_valid_name"]
