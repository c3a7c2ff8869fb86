"""String searching, comparison, slicing and building helpers.

Positions are returned as indices into the string, or ``None`` when there is
no match. Searching for the NUL character finds the end of the string, where
a terminated string would keep it.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Turn a character code or a one-character string into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    # Like a conversion to char: only the low byte counts.
    return chr(c & 0xFF)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``len(s)`` for NUL; ``None`` if absent."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``len(s)`` for NUL; ``None`` if absent."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. ``None`` means no match lies
    wholly within the first ``length`` characters.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch
    (the shorter string counting as ending in NUL), or 0 if they agree.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip(s1[:n] + _NUL, s2[:n] + _NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` cells, one kept for the terminator.

    Returns the copied text, cut to at most ``size - 1`` characters, and the
    full length of ``src``, so that truncation shows as ``length >= size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` cells.

    Returns the resulting text and the length it tried to create. When the
    buffer is already full (``size`` not above ``len(dst)``) ``dst`` is left
    as it is and the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0 or len(dst) >= size:
        return dst, size + len(src)
    space_left = size - len(dst) - 1
    return dst + src[:space_left], len(dst) + len(src)


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _require_str(s, "s")
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``s``."""
    return _require_str(s, "s").strip(_require_str(charset, "charset"))


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    _require_str(s, "s")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` for each character, in place.

    Whatever ``f`` returns, other than ``None``, replaces that character.
    """
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement