"""Date formatting with ``yyyy-MM-dd HH:mm:ss`` style patterns."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

DEFAULT_PATTERN = "yyyy-MM-dd HH:mm:ss"

_Field = Callable[[datetime], str]


def _padded(value: int, width: int) -> str:
    return str(value).zfill(width)


def _year(width: int) -> _Field:
    if width == 2:
        return lambda dt: _padded(dt.year % 100, 2)
    return lambda dt: _padded(dt.year, width)


def _month(width: int) -> _Field:
    if width >= 4:
        return lambda dt: dt.strftime("%B")
    if width == 3:
        return lambda dt: dt.strftime("%b")
    return lambda dt: _padded(dt.month, width)


def _hour12(width: int) -> _Field:
    return lambda dt: _padded(dt.hour % 12 or 12, width)


def _weekday(width: int) -> _Field:
    fmt = "%A" if width >= 4 else "%a"
    return lambda dt: dt.strftime(fmt)


def _attr(name: str) -> Callable[[int], _Field]:
    return lambda width: (lambda dt: _padded(getattr(dt, name), width))


_FIELDS: dict[str, Callable[[int], _Field]] = {
    "y": _year,
    "M": _month,
    "d": _attr("day"),
    "H": _attr("hour"),
    "h": _hour12,
    "m": _attr("minute"),
    "s": _attr("second"),
    "S": lambda width: (lambda dt: _padded(dt.microsecond // 1000, width)),
    "a": lambda width: (lambda dt: "AM" if dt.hour < 12 else "PM"),
    "E": _weekday,
    "Z": lambda width: (lambda dt: dt.strftime("%z")),
    "z": lambda width: (lambda dt: dt.strftime("%Z")),
}


def _compile(pattern: str) -> list[str | _Field]:
    parts: list[str | _Field] = []
    literal: list[str] = []
    i, n = 0, len(pattern)

    def flush_literal() -> None:
        if literal:
            parts.append("".join(literal))
            literal.clear()

    while i < n:
        ch = pattern[i]
        if ch == "'":
            # '' is an escaped quote, otherwise quoted text runs to the next quote
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while end < n:
                if pattern[end] == "'":
                    if end + 1 < n and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            if end >= n:
                raise ValueError(f"Unterminated quote in date pattern: {pattern!r}")
            i = end + 1
            continue
        if ch.isascii() and ch.isalpha():
            if ch not in _FIELDS:
                raise ValueError(f"Unsupported date pattern letter {ch!r} in {pattern!r}")
            run = i
            while run < n and pattern[run] == ch:
                run += 1
            flush_literal()
            parts.append(_FIELDS[ch](run - i))
            i = run
            continue
        literal.append(ch)
        i += 1

    flush_literal()
    return parts


class DateFormat:
    """Formats datetimes with a pattern such as ``yyyy-MM-dd HH:mm:ss``.

    Supported letters: ``y M d H h m s S a E Z z``. Text in single quotes is
    copied literally (``''`` yields one quote). A pattern containing ``%`` is
    treated as an :func:`~datetime.datetime.strftime` format instead.
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN) -> None:
        self._pattern = pattern
        self._strftime = "%" in pattern
        self._parts = [] if self._strftime else _compile(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    def format(self, when: datetime | None = None) -> str:
        when = when or datetime.now().astimezone()
        if self._strftime:
            return when.strftime(self._pattern)
        return "".join(p if isinstance(p, str) else p(when) for p in self._parts)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DateFormat) and other._pattern == self._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    def __repr__(self) -> str:
        return f"DateFormat({self._pattern!r})"
