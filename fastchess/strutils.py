"""Small string helpers used by option parsing."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar, Union

T = TypeVar("T")


def starts_with(haystack: str, needle: str) -> bool:
    """True if haystack starts with needle; an empty needle never matches."""
    if not needle:
        return False
    return haystack.startswith(needle)


def ends_with(value: str, ending: str) -> bool:
    """True if value ends with ending."""
    return value.endswith(ending)


def contains(haystack: Union[str, Sequence[str]], needle: str) -> bool:
    """Substring test for a string, membership test for a sequence of strings."""
    if isinstance(haystack, str):
        return needle in haystack
    return any(item == needle for item in haystack)


def split_string(string: str, delimiter: str) -> List[str]:
    """Split on delimiter, dropping empty segments."""
    return [segment for segment in string.split(delimiter) if segment]


def find_element(
    haystack: Sequence[str], needle: str, kind: Callable[[str], T] = str
) -> Optional[T]:
    """Return the element following needle converted with kind, or None if absent.

    Raises IndexError if needle is the last element and ValueError if the
    following element cannot be converted.
    """
    try:
        index = list(haystack).index(needle)
    except ValueError:
        return None
    return kind(haystack[index + 1])


def join(strings: Sequence[str], delimiter: str) -> str:
    """Concatenate strings, appending delimiter after every element."""
    return "".join(string + delimiter for string in strings)