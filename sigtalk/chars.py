"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

# Space plus the control characters \t, \n, \v, \f and \r.
_SPACES = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
        return chr(code) if isinstance(c, str) else code
    return c


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
        return chr(code) if isinstance(c, str) else code
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading blanks (space, tab, newline, vertical tab, form feed, carriage
    return) are skipped, then one optional sign, then as many digits as
    follow. Parsing stops at the first other character; text without digits
    gives 0. The result wraps to a signed 32-bit integer.
    """
    chars = iter(text)
    current = next(chars, "")
    while current and current in _SPACES:
        current = next(chars, "")

    sign = 1
    if current in ("-", "+"):
        if current == "-":
            sign = -1
        current = next(chars, "")

    value = 0
    while current and isdigit(current):
        value = value * 10 + (ord(current) - ord("0"))
        current = next(chars, "")

    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    digits = []
    magnitude = -n if n < 0 else n
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))