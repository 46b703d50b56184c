"""
Age-based pricing from the chapter on equivalence partitioning and boundary values.

classify_age() maps an age onto one of four brackets through ordered threshold
comparisons. Every bracket is an equivalence partition, every threshold a
boundary, which is what makes the function the chapter's running example.
"""

import logging
from enum import Enum

from testbook.validators.input_validators import ensure_non_negative_int, ensure_non_negative_number

logger = logging.getLogger(__name__)


class AgeBracket(str, Enum):
    CHILD = "child"
    TEEN = "teen"
    ADULT = "adult"
    SENIOR = "senior"


# Lower bounds of TEEN, ADULT and SENIOR, in ascending order.
AGE_THRESHOLDS: tuple[int, ...] = (13, 18, 65)

# Percentage discount per bracket.
BRACKET_DISCOUNTS: dict[AgeBracket, int] = {
    AgeBracket.CHILD: 50,
    AgeBracket.TEEN: 20,
    AgeBracket.ADULT: 0,
    AgeBracket.SENIOR: 30,
}


def classify_age(age: int) -> AgeBracket:
    """
    Map a non-negative integer age to its bracket.

        0..12  -> child
        13..17 -> teen
        18..64 -> adult
        65..   -> senior

    Raises:
        InvalidInputError: if `age` is negative or not an int (bool included).
    """
    ensure_non_negative_int(age, "age")
    teen, adult, senior = AGE_THRESHOLDS
    if age < teen:
        return AgeBracket.CHILD
    if age < adult:
        return AgeBracket.TEEN
    if age < senior:
        return AgeBracket.ADULT
    return AgeBracket.SENIOR


def discount_for_age(age: int) -> int:
    return BRACKET_DISCOUNTS[classify_age(age)]


def apply_age_discount(price: float, age: int) -> float:
    """
    Price after the age discount, rounded to cents.

    Raises:
        InvalidInputError: if `price` is negative or not a number, or `age` is invalid.
    """
    amount = ensure_non_negative_number(price, "price")
    percent = discount_for_age(age)
    discounted = round(amount * (100 - percent) / 100, 2)
    logger.debug("age discount applied", extra={"age": age, "percent": percent})
    return discounted


__all__ = [
    "AgeBracket",
    "AGE_THRESHOLDS",
    "BRACKET_DISCOUNTS",
    "classify_age",
    "discount_for_age",
    "apply_age_discount",
]
