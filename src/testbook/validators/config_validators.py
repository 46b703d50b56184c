def normalize_case(value: str | None, *, upper: bool) -> str | None:
    """
    Upper- or lower-case a raw setting value, stripping surrounding whitespace.
    None passes through untouched so pydantic can apply the field default.
    """
    if value is None:
        return None
    value = value.strip()
    return value.upper() if upper else value.lower()
