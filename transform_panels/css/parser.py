"""CSS value parser — property text → tagged value tree.

Covers the shapes the transform panels deal with: function lists for
``transform``, axis triples for ``translate`` and ``scale``, and plain
numbers/keywords for anything else.
"""

from __future__ import annotations

import logging
import re

from transform_panels.models.values import (
    FunctionValue,
    KeywordValue,
    LayersValue,
    StyleValue,
    TupleValue,
    UnitValue,
)

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)([a-zA-Z%]*)$")
_KEYWORD_RE = re.compile(r"^-?[a-zA-Z_][\w-]*$")
_FUNCTION_RE = re.compile(r"\s*([a-zA-Z][\w-]*)\(([^()]*)\)\s*")

# Axis properties always hold x, y and z.
_AXIS_PROPERTIES = {"translate", "scale"}


class CssParseError(ValueError):
    """Raised when property text is not a value this parser understands."""


def parse_css_value(prop: str, text: str) -> StyleValue:
    """Parse the text of a single CSS property into a value tree."""
    text = text.strip()
    if not text:
        raise CssParseError(f"{prop}: empty value")

    if _KEYWORD_RE.match(text) and "(" not in text:
        return KeywordValue(value=text.lower())

    if prop == "transform":
        return _parse_function_list(text)

    parts = text.split()
    units = [_parse_unit(prop, part) for part in parts]

    if prop in _AXIS_PROPERTIES:
        return _pad_axes(prop, units)

    if len(units) == 1:
        return units[0]
    return TupleValue(value=units)


def _parse_function_list(text: str) -> TupleValue:
    functions: list[FunctionValue] = []
    pos = 0
    while pos < len(text):
        m = _FUNCTION_RE.match(text, pos)
        if m is None:
            raise CssParseError(f"transform: unexpected input at {text[pos:]!r}")
        name, raw_args = m.group(1), m.group(2)
        functions.append(FunctionValue(name=name, args=_parse_args(name, raw_args)))
        pos = m.end()

    logger.debug("Parsed transform: %d functions", len(functions))
    return TupleValue(value=functions)


def _parse_args(name: str, raw_args: str) -> LayersValue:
    args: list[StyleValue] = []
    for raw in raw_args.split(","):
        raw = raw.strip()
        if not raw:
            raise CssParseError(f"{name}(): empty argument")
        if _KEYWORD_RE.match(raw):
            args.append(KeywordValue(value=raw.lower()))
        else:
            args.append(_parse_unit(name, raw))
    return LayersValue(value=args)


def _parse_unit(prop: str, raw: str) -> UnitValue:
    m = _NUMBER_RE.match(raw)
    if m is None:
        raise CssParseError(f"{prop}: invalid number {raw!r}")
    unit = m.group(2).lower() or "number"
    return UnitValue(value=float(m.group(1)), unit=unit)


def _pad_axes(prop: str, units: list[UnitValue]) -> TupleValue:
    """Fill the omitted axes the way CSS defines them."""
    if len(units) > 3:
        raise CssParseError(f"{prop}: expected at most 3 values, got {len(units)}")

    if prop == "translate":
        while len(units) < 3:
            units.append(UnitValue(value=0, unit="px"))
    else:
        # scale: a single value applies to x and y; z defaults to 1
        if len(units) == 1:
            units.append(units[0])
        if len(units) == 2:
            units.append(UnitValue(value=1, unit="number"))

    return TupleValue(value=units)
