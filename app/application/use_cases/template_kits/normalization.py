"""Normalize loosely typed filter input into a single internal form.

Query string values arrive as ``None``, a single string, or a sequence of
strings (repeated parameters). Every helper here accepts all three shapes and
never raises for malformed input; the worst outcome is "no value".
"""

from __future__ import annotations

from collections.abc import Iterable

TRUTHY_VALUES = frozenset({"1", "true", "on", "yes"})

RawValue = str | Iterable[str] | None


def _iter_raw(value: object) -> Iterable[object]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)):
        return (value,)
    if isinstance(value, Iterable):
        return value
    return (value,)


def clean_string(value: object) -> str | None:
    """Return the first non-empty trimmed string in ``value`` or ``None``."""

    for item in _iter_raw(value):
        if item is None:
            continue
        text = str(item).strip()
        if text:
            return text
    return None


def to_string_list(value: object, *, split_commas: bool = True) -> list[str]:
    """Flatten ``value`` into trimmed, non-empty, de-duplicated strings.

    ``"a, b"``, ``["a", "b"]`` and ``["a,b"]`` all produce ``["a", "b"]``.
    With ``split_commas=False`` each provided value is kept whole.
    """

    result: list[str] = []
    seen: set[str] = set()
    for item in _iter_raw(value):
        if item is None:
            continue
        parts = str(item).split(",") if split_commas else [str(item)]
        for part in parts:
            text = part.strip()
            if text and text not in seen:
                seen.add(text)
                result.append(text)
    return result


def parse_bool(value: object) -> bool | None:
    """Parse a permissive boolean; ``None`` when the value is absent or empty."""

    if isinstance(value, bool):
        return value
    text = clean_string(value)
    if text is None:
        return None
    return text.lower() in TRUTHY_VALUES


def parse_int(
    value: object,
    *,
    default: int,
    minimum: int = 1,
    maximum: int | None = None,
) -> int:
    """Parse a base-10 integer and clamp it into ``[minimum, maximum]``.

    Anything that is not an integer falls back to ``default`` before clamping.
    """

    if isinstance(value, bool):
        number = default
    elif isinstance(value, int):
        number = value
    else:
        text = clean_string(value)
        try:
            number = int(text, 10) if text is not None else default
        except ValueError:
            number = default

    number = max(minimum, number)
    if maximum is not None:
        number = min(maximum, number)
    return number


__all__ = [
    "TRUTHY_VALUES",
    "RawValue",
    "clean_string",
    "parse_bool",
    "parse_int",
    "to_string_list",
]
