"""Character classification in the C locale.

Each function takes a character code or a one-character string. Codes
outside 7-bit ASCII are never classified as anything.
"""

from __future__ import annotations

import string

__all__ = [
    "is_alpha_numeric",
    "is_alpha",
    "is_ascii",
    "is_whitespace",
    "is_control",
    "is_digit",
    "is_graph",
    "is_lower_case",
    "is_printable",
    "is_punct",
    "is_space",
    "is_upper_case",
    "is_hexadecimal_digit",
    "to_ascii",
    "to_lower_case",
    "to_upper_case",
]


def _code(c) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return int(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _in(c, chars: str) -> bool:
    code = _code(c)
    return 0 <= code < 128 and chr(code) in chars


def _like(c, code: int):
    """Return ``code`` in the same form as ``c`` was given."""
    return chr(code) if isinstance(c, str) else code


def is_alpha_numeric(c) -> bool:
    return _in(c, string.ascii_letters + string.digits)


def is_alpha(c) -> bool:
    return _in(c, string.ascii_letters)


def is_ascii(c) -> bool:
    return 0 <= _code(c) < 128


def is_whitespace(c) -> bool:
    """Space or tab."""
    return _in(c, " \t")


def is_control(c) -> bool:
    code = _code(c)
    return 0 <= code < 32 or code == 127


def is_digit(c) -> bool:
    return _in(c, string.digits)


def is_graph(c) -> bool:
    """Printable and not a space."""
    return 33 <= _code(c) <= 126


def is_lower_case(c) -> bool:
    return _in(c, string.ascii_lowercase)


def is_printable(c) -> bool:
    """Printable, space included."""
    return 32 <= _code(c) <= 126


def is_punct(c) -> bool:
    return _in(c, string.punctuation)


def is_space(c) -> bool:
    """Space, tab, newline, vertical tab, form feed or carriage return."""
    return _in(c, string.whitespace)


def is_upper_case(c) -> bool:
    return _in(c, string.ascii_uppercase)


def is_hexadecimal_digit(c) -> bool:
    return _in(c, string.hexdigits)


def to_ascii(c):
    """Clear all but the low seven bits."""
    return _like(c, _code(c) & 0x7F)


def to_lower_case(c):
    code = _code(c)
    if is_upper_case(code):
        code += ord("a") - ord("A")
    return _like(c, code)


def to_upper_case(c):
    code = _code(c)
    if is_lower_case(code):
        code -= ord("a") - ord("A")
    return _like(c, code)