from .palindrome import is_palindrome
from .pricing import AgeBracket, AGE_THRESHOLDS, classify_age, discount_for_age, apply_age_discount
from .users import UserPayload, fetch_user_name
from .cases import Case, CaseTable, load_case_table, boundary_values, partition_representatives

__all__ = [
    "is_palindrome",
    "AgeBracket",
    "AGE_THRESHOLDS",
    "classify_age",
    "discount_for_age",
    "apply_age_discount",
    "UserPayload",
    "fetch_user_name",
    "Case",
    "CaseTable",
    "load_case_table",
    "boundary_values",
    "partition_representatives",
]
