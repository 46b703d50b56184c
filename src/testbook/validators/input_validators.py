from decimal import Decimal
from numbers import Real

from ..exceptions.base import InvalidInputError


def ensure_str(value: object, field: str) -> str:
    """
    Return `value` unchanged if it is a str, otherwise raise InvalidInputError naming `field`.
    """
    if not isinstance(value, str):
        raise InvalidInputError(
            f"{field} must be a string, got {type(value).__name__}", fields=[field]
        )
    return value


def ensure_non_negative_int(value: object, field: str) -> int:
    """
    Return `value` if it is a non-negative int.

    bool is rejected even though it subclasses int: `classify_age(True)` is a caller bug,
    not an age of 1.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(
            f"{field} must be an integer, got {type(value).__name__}", fields=[field]
        )
    if value < 0:
        raise InvalidInputError(f"{field} must not be negative, got {value}", fields=[field])
    return value


def ensure_non_negative_number(value: object, field: str) -> float:
    """
    Return `value` as a float if it is a non-negative real number or Decimal.

    Decimal is not registered as numbers.Real, so it is accepted explicitly.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidInputError(
            f"{field} must be a number, got {type(value).__name__}", fields=[field]
        )
    if value < 0:
        raise InvalidInputError(f"{field} must not be negative, got {value}", fields=[field])
    return float(value)


__all__ = ["ensure_str", "ensure_non_negative_int", "ensure_non_negative_number"]
