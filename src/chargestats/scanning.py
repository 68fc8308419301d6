"""Scan-format descriptors for line-oriented diagnostic logs.

Templates use a small ``sscanf``-style vocabulary:

* ``%d`` signed decimal integer
* ``%x`` 32-bit hex word, optional ``0x`` prefix
* ``%f`` decimal floating point
* a space matches optional whitespace; any other character is literal

Matching is anchored at the start of the line and ignores trailing text, so
formats that are strict supersets of each other must be tried richest first.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field


ScannedValue = int | float


def _hex_word(text: str) -> int:
    value = int(text, 16) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


_CONVERSIONS: dict[str, tuple[str, Callable[[str], ScannedValue]]] = {
    "d": (r"\s*([-+]?\d+)(?!\d)", int),
    "x": (r"\s*((?:0[xX])?[0-9a-fA-F]+)(?![0-9a-fA-F])", _hex_word),
    "f": (r"\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)(?![\d.])", float),
}


def _compile_template(template: str) -> tuple[re.Pattern[str], tuple[Callable[[str], ScannedValue], ...]]:
    parts: list[str] = []
    converters: list[Callable[[str], ScannedValue]] = []
    idx = 0
    while idx < len(template):
        char = template[idx]
        if char == "%":
            if idx + 1 >= len(template) or template[idx + 1] not in _CONVERSIONS:
                raise ValueError(f"unsupported conversion in template: {template!r}")
            pattern, converter = _CONVERSIONS[template[idx + 1]]
            parts.append(pattern)
            converters.append(converter)
            idx += 2
            continue
        parts.append(r"\s*" if char == " " else re.escape(char))
        idx += 1
    return re.compile("".join(parts)), tuple(converters)


@dataclass(frozen=True, slots=True)
class ScanFormat:
    """One accepted line layout with named fields."""

    name: str
    template: str
    field_names: tuple[str, ...]
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _converters: tuple[Callable[[str], ScannedValue], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        pattern, converters = _compile_template(self.template)
        if len(converters) != len(self.field_names):
            raise ValueError(
                f"format {self.name!r} has {len(converters)} conversions "
                f"but {len(self.field_names)} field names"
            )
        if len(set(self.field_names)) != len(self.field_names):
            raise ValueError(f"format {self.name!r} has duplicate field names")
        object.__setattr__(self, "_pattern", pattern)
        object.__setattr__(self, "_converters", converters)

    @property
    def arity(self) -> int:
        return len(self.field_names)

    def scan(self, line: str) -> dict[str, ScannedValue] | None:
        """Return named values if the line matches, else `None`."""
        match = self._pattern.match(line)
        if match is None:
            return None
        return {
            name: convert(text)
            for name, convert, text in zip(self.field_names, self._converters, match.groups())
        }


def first_match(
    formats: Iterable[ScanFormat],
    line: str,
) -> tuple[ScanFormat, dict[str, ScannedValue]] | None:
    """Return the first format in order that matches `line` with its values."""
    for scan_format in formats:
        values = scan_format.scan(line)
        if values is not None:
            return scan_format, values
    return None


def int_values(values: Mapping[str, ScannedValue], names: Iterable[str]) -> tuple[int, ...]:
    """Collect integer values in the given field order."""
    return tuple(int(values[name]) for name in names)
