"""Write canonical CSS text from a value tree."""

from __future__ import annotations

from transform_panels.models.values import (
    FunctionValue,
    KeywordValue,
    LayersValue,
    StyleValue,
    TupleValue,
    UnitValue,
)


def to_value(value: StyleValue | None) -> str:
    """Serialize a value. Hidden tuples and functions render as empty text."""
    if value is None:
        return ""

    if isinstance(value, UnitValue):
        number = _format_number(value.value)
        return number if value.unit == "number" else f"{number}{value.unit}"

    if isinstance(value, KeywordValue):
        return value.value

    if isinstance(value, TupleValue):
        if value.hidden:
            return ""
        return _join(value.value, " ")

    if isinstance(value, LayersValue):
        return _join(value.value, ", ")

    if isinstance(value, FunctionValue):
        if value.hidden:
            return ""
        return f"{value.name}({to_value(value.args)})"

    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def _join(items: tuple[StyleValue, ...], sep: str) -> str:
    parts = (to_value(item) for item in items)
    return sep.join(part for part in parts if part)


def _format_number(number: float) -> str:
    if float(number).is_integer():
        return str(int(number))
    return f"{number:.10g}"
