from .base import (
    TestbookError,
    InvalidInputError,
    NotFoundError,
    InvalidCaseTableError,
)

__all__ = ["TestbookError", "InvalidInputError", "NotFoundError", "InvalidCaseTableError"]
