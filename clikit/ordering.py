"""Ordering helpers used when sorting names for display."""


def lexicographic_less(a: str, b: str) -> bool:
    """Return True if ``a`` sorts before ``b`` alphabetically.

    Characters are compared case-insensitively first. When two characters
    differ only in case, the one with the lower code point wins.
    """
    for left, right in zip(a, b):
        lower_left, lower_right = left.lower(), right.lower()
        if lower_left != lower_right:
            return lower_left < lower_right
        if left != right:
            return left < right
    return a < b