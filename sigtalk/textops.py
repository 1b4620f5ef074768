"""String and byte-buffer helpers: searching, comparing, slicing and splitting."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Iterator, List, Optional, Tuple, Union

CharLike = Union[str, int]
BytesLike = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Return a one-character string for a character or an integer code.

    Integer codes are reduced to a byte, as a C ``unsigned char`` cast would.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _codes(text: Union[str, BytesLike]) -> Iterator[int]:
    if isinstance(text, str):
        return (ord(ch) for ch in text)
    return iter(bytes(text))


def split(text: str, sep: CharLike) -> List[str]:
    """Split ``text`` on the separator character, dropping empty pieces."""
    separator = _as_char(sep)
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    _check_count("start", start)
    _check_count("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _check_count("limit", limit)
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return index if index >= 0 else None


def strncmp(s1: Union[str, BytesLike], s2: Union[str, BytesLike], n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when the prefixes match.
    """
    _check_count("n", n)
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def memcmp(b1: BytesLike, b2: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    Raises ValueError when either buffer is shorter than ``n``.
    """
    _check_count("n", n)
    first, second = bytes(b1), bytes(b2)
    if n > len(first) or n > len(second):
        raise ValueError(f"cannot compare {n} bytes: buffers hold {len(first)} and {len(second)}")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    ``value`` is reduced to a byte. Returns None when it does not occur.
    Raises ValueError when the buffer is shorter than ``n``.
    """
    _check_count("n", n)
    buffer = bytes(data)
    if n > len(buffer):
        raise ValueError(f"cannot search {n} bytes: buffer holds {len(buffer)}")
    index = buffer.find(value & 0xFF, 0, n)
    return index if index >= 0 else None


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``char`` in ``text``.

    Searching for the NUL character gives the length of the text, the place
    of the terminator. Returns None when the character does not occur.
    """
    wanted = _as_char(char)
    if wanted == _NUL:
        return len(text)
    index = text.find(wanted)
    return index if index >= 0 else None


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``char`` in ``text``.

    Searching for the NUL character gives the length of the text. Returns
    None when the character does not occur.
    """
    wanted = _as_char(char)
    if wanted == _NUL:
        return len(text)
    index = text.rfind(wanted)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, so a truncation shows as a length of ``size`` or more.
    """
    _check_count("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the caller tried to create:
    ``len(dst) + len(src)``, or ``size + len(src)`` when ``dst`` already
    fills the buffer, or ``len(src)`` for a size of 0.
    """
    _check_count("size", size)
    if size == 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(text))