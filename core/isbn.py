# core/isbn.py
import re

ISBN10_PATTERN = re.compile(r"^(?:[0-9]{9}X|[0-9]{10})$")
ISBN13_PATTERN = re.compile(r"^(?:97(?:8|9)[0-9]{10})$")


def _strip(value: str, limit: int) -> str:
    # Only the separators a printed ISBN can carry are dropped
    return value.replace("-", "", limit).replace(" ", "", limit)


def is_isbn10(value: str) -> bool:
    """Check an ISBN-10, e.g. ``0-306-40615-2``"""
    s = _strip(value, 3)
    if not ISBN10_PATTERN.match(s):
        return False

    checksum = sum((i + 1) * int(s[i]) for i in range(9))
    checksum += 10 * (10 if s[9] == "X" else int(s[9]))
    return checksum % 11 == 0


def is_isbn13(value: str) -> bool:
    """Check an ISBN-13, e.g. ``978-0-306-40615-7``"""
    s = _strip(value, 4)
    if not ISBN13_PATTERN.match(s):
        return False

    factor = (1, 3)
    checksum = sum(factor[i % 2] * int(s[i]) for i in range(12))
    return (int(s[12]) - ((10 - (checksum % 10)) % 10)) == 0


def is_isbn(value: str) -> bool:
    return is_isbn10(value) or is_isbn13(value)
