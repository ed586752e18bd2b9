"""Small text helpers with classic C-library semantics.

Characters are accepted either as one-character strings or as integer
codes.  Functions that locate text return an index, or ``None`` when
nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Union

CharLike = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as str or int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError("expected a character or an integer code")


def _as_char(c: CharLike) -> str:
    """Return a one-character string for a character given as str or int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_code(c) % 256)


def _wrap_int(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Parsing stops at the first non-digit; text without digits yields 0.
    The result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("itoa expects an integer")
    return str(n)


def split(text: str, sep: CharLike) -> list[str]:
    """Split text on a separator character, dropping empty words."""
    separator = _as_char(sep)
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start beyond the end of text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle within the first length characters of haystack.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Returns the code difference of the first differing characters, with the
    end of a string counting as code 0, or 0 when they match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of char, or None.

    Searching for the NUL character finds the end of the text.
    """
    target = _as_char(char)
    if target == "\0":
        found = text.find(target)
        return len(text) if found < 0 else found
    found = text.find(target)
    return None if found < 0 else found


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of char, or None.

    Searching for the NUL character finds the end of the text.
    """
    target = _as_char(char)
    if target == "\0":
        return len(text)
    found = text.rfind(target)
    return None if found < 0 else found


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying func to each index and character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) < 127


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital letter; other input is returned as is."""
    code = _code(c)
    result = code + 32 if 65 <= code <= 90 else code
    return chr(result) if isinstance(c, str) else result


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; other input is returned as is."""
    code = _code(c)
    result = code - 32 if 97 <= code <= 122 else code
    return chr(result) if isinstance(c, str) else result