"""Domain normalization helpers."""


def normalize_currency_code(code: str | None) -> str | None:
    """Normalize currency code values.

    Args:
        code: Raw currency code from a form, repository, or setting.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


__all__ = ["normalize_currency_code"]
