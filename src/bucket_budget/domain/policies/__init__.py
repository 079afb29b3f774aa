"""Domain policies package."""

from .names import is_valid_name

__all__ = ["is_valid_name"]
