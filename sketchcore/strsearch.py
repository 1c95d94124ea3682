"""Searching and editing helpers with the embedded String class's rules.

Indices are unsigned on the target, so a negative index is read as a very
large one. A one-character target follows the single-character rules and a
longer one the substring rules. These differ only in ``last_index_of``
when ``from_index`` is past the end.
"""

from __future__ import annotations

__all__ = [
    "index_of",
    "last_index_of",
    "substring",
    "replace",
    "remove",
    "trim",
]

_UINT = 0xFFFFFFFF
_C_SPACE = " \t\n\v\f\r"


def _unsigned(value: int) -> int:
    return value & _UINT


def index_of(text: str, target: str, from_index: int = 0) -> int:
    """Return the first index of ``target`` at or after ``from_index``, or -1."""
    from_index = _unsigned(from_index)
    if from_index >= len(text):
        return -1
    return text.find(target, from_index)


def _last_index_of_char(text: str, ch: str, from_index: int) -> int:
    if from_index >= len(text):
        return -1
    return text.rfind(ch, 0, from_index + 1)


def _last_index_of_str(text: str, target: str, from_index: int) -> int:
    if not target or not text or len(target) > len(text):
        return -1
    if from_index >= len(text):
        from_index = len(text) - 1
    # A match may start at from_index and run past it.
    return text.rfind(target, 0, from_index + len(target))


def last_index_of(text: str, target: str, from_index: int | None = None) -> int:
    """Return the last index of ``target`` starting at or before ``from_index``.

    Returns -1 when there is none.
    """
    if len(target) == 1:
        if from_index is None:
            from_index = len(text) - 1
        return _last_index_of_char(text, target, _unsigned(from_index))
    if from_index is None:
        from_index = len(text) - len(target)
    return _last_index_of_str(text, target, _unsigned(from_index))


def substring(text: str, left: int, right: int | None = None) -> str:
    """Return ``text[left:right]``; the bounds are swapped if reversed."""
    left = _unsigned(left)
    right = len(text) if right is None else _unsigned(right)
    if left > right:
        left, right = right, left
    if left >= len(text):
        return ""
    return text[left:min(right, len(text))]


def _count_forward(text: str, find: str) -> int:
    count = 0
    start = 0
    while (found := text.find(find, start)) >= 0:
        count += 1
        start = found + len(find)
    return count


def _replace_backwards(text: str, find: str, replacement: str) -> str:
    index = len(text) - 1
    while index >= 0:
        index = _last_index_of_str(text, find, index)
        if index < 0:
            break
        text = text[:index] + replacement + text[index + len(find):]
        index -= 1
    return text


def replace(text: str, find: str, replacement: str) -> str:
    """Replace occurrences of ``find`` with ``replacement``.

    Same-length replacement scans forwards. Otherwise occurrences are
    replaced scanning backwards, which can pick different overlapping
    matches than a forward scan. A shorter replacement leaves the text
    untouched when the forward count of matches is even, as the target
    library does.
    """
    if not text or not find:
        return text
    diff = len(replacement) - len(find)
    if diff == 0:
        return text.replace(find, replacement)
    count = _count_forward(text, find)
    if count == 0:
        return text
    if diff < 0 and count % 2 == 0:
        # The size bookkeeping alternates sign per match and nets to zero.
        return text
    return _replace_backwards(text, find, replacement)


def remove(text: str, index: int, count: int | None = None) -> str:
    """Remove ``count`` characters from ``index`` (all the rest if omitted)."""
    index = _unsigned(index)
    if index >= len(text):
        return text
    count = _UINT if count is None else _unsigned(count)
    if count == 0:
        return text
    count = min(count, len(text) - index)
    return text[:index] + text[index + count:]


def trim(text: str) -> str:
    """Strip C whitespace (space, tab, newline, vtab, formfeed, return)."""
    return text.strip(_C_SPACE)