"""Typed failures raised by budget commands.

Every error is a local validation failure. A command that raises leaves all
entities in their prior state.
"""


class BudgetError(Exception):
    """Base class for rejected budget commands.

    Attributes:
        message: Human readable description of the violated precondition.
        details: Offending identifiers or values.
    """

    def __init__(self, message: str, **details) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidDistribution(BudgetError):
    """Bucket keys or percentages of a distribution are invalid."""


class InvalidExpense(BudgetError):
    """Expense amount is not a positive currency value."""


class InvalidCategory(BudgetError):
    """Category name, bucket, goal or weekly limit is invalid."""


class InvalidStream(BudgetError):
    """Income stream name or amount is invalid."""


class CategoryNotFound(BudgetError):
    """No category exists with the given identifier."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            f"Unknown category: {category_id}",
            category_id=category_id,
        )
        self.category_id = category_id


class StreamNotFound(BudgetError):
    """No income stream exists with the given identifier."""

    def __init__(self, stream_id: str) -> None:
        super().__init__(
            f"Unknown income stream: {stream_id}",
            stream_id=stream_id,
        )
        self.stream_id = stream_id


__all__ = [
    "BudgetError",
    "InvalidDistribution",
    "InvalidExpense",
    "InvalidCategory",
    "InvalidStream",
    "CategoryNotFound",
    "StreamNotFound",
]
