"""Identifier generation for budget entities."""

import uuid


def new_identifier() -> str:
    """Return a random hexadecimal identifier."""
    return uuid.uuid4().hex


__all__ = ["new_identifier"]
