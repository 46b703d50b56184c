"""
Palindrome check from the chapter on unit tests and edge cases.
"""

import logging

from testbook.validators.input_validators import ensure_str

logger = logging.getLogger(__name__)


def _normalized(text: str) -> str:
    return "".join(ch.casefold() for ch in text if ch.isalnum())


def is_palindrome(text: str, *, normalize: bool = True) -> bool:
    """
    Return True if `text` reads the same forward and backward.

    Args:
        text: the string to check.
        normalize: when True (default) only letters and digits are compared and
            case is ignored, so "A man, a plan, a canal: Panama" is a palindrome.
            When False the string must equal its exact reversal, which is the
            simplified check the chapter starts from.

    Raises:
        InvalidInputError: if `text` is not a str.

    The empty string is a palindrome, and so is any string that has no
    alphanumeric characters once normalized.
    """
    ensure_str(text, "text")
    candidate = _normalized(text) if normalize else text
    result = candidate == candidate[::-1]
    logger.debug("palindrome check", extra={"length": len(text), "normalize": normalize, "result": result})
    return result


__all__ = ["is_palindrome"]
