"""Simple string routines: length, reversal and palindrome checks."""

from __future__ import annotations

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def length(text: str) -> int:
    """Return the number of characters before the first NUL, if any."""
    return len(text.partition("\0")[0])


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways, case-sensitively."""
    return text == text[::-1]


def is_palindrome_ignore_case(text: str) -> bool:
    """Palindrome check that folds ASCII capitals to lower case first."""
    return is_palindrome(text.translate(_ASCII_LOWER))


def is_alnum_palindrome(text: str) -> bool:
    """Palindrome check over ASCII letters and digits only, ignoring case."""
    kept = "".join(ch for ch in text if ch in _ASCII_ALNUM)
    return is_palindrome_ignore_case(kept)


def reverse_words(text: str) -> str:
    """Reverse every space-separated word in place, keeping the spaces."""
    return " ".join(word[::-1] for word in text.split(" "))