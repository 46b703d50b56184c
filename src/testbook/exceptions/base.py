"""
Application-level exceptions raised by the example functions and the case-table loader.
"""

from typing import Iterable

# canonical testbook exception

class TestbookError(Exception):
    """
    Base exception for every error the package raises on purpose.

    - message: human-friendly message
    - fields: optional list of argument names related to the error (e.g. ['age'])
    - error_code: canonical short code (e.g. 'invalid_input', 'not_found')
    """

    # Keeps pytest from collecting this class when it is imported into a test module.
    __test__ = False

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def to_payload(self) -> dict:
        """
        Return a JSON-serializable dict describing the error.
        Shape:
            {
                "detail": "A human-friendly message",
                "code": "invalid_input",   # optional
                "fields": ["age"],         # optional
            }
        """
        payload = {"detail": self.message}
        if self.error_code:
            payload["code"] = self.error_code
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload


class InvalidInputError(TestbookError):
    """Raised when an example function receives an argument outside its input domain."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="invalid_input")


class NotFoundError(TestbookError):
    def __init__(self, message: str = "Not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="not_found")


class InvalidCaseTableError(TestbookError):
    """Raised when a case table file cannot be parsed or does not match the table schema."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="invalid_case_table")


__all__ = [
    "TestbookError",
    "InvalidInputError",
    "NotFoundError",
    "InvalidCaseTableError",
]
