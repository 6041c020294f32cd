"""Read a function panel's entries out of a transform list."""

from __future__ import annotations

from typing import Iterable

from transform_panels.models.values import FunctionValue, StyleValue, TupleValue
from transform_panels.transforms.registry import Panel, lookup


def transform_items(transform: StyleValue | None) -> list[StyleValue]:
    """Items of a transform list. Absent or keyword values (``none``) are empty."""
    if isinstance(transform, TupleValue):
        return list(transform.value)
    return []


def is_member(item: StyleValue, member_names: Iterable[str]) -> bool:
    return isinstance(item, FunctionValue) and item.name in member_names


def extract_functions(
    transform: StyleValue | None, member_names: Iterable[str]
) -> dict[str, FunctionValue | None]:
    """Map each member name to its function in the list, or None.

    Functions are returned unchanged, hidden flag included.
    """
    found: dict[str, FunctionValue] = {}
    for item in transform_items(transform):
        if isinstance(item, FunctionValue) and item.name not in found:
            found[item.name] = item
    return {name: found.get(name) for name in member_names}


def extract_group(panel: Panel | str, transform: StyleValue | None) -> dict[str, FunctionValue | None]:
    return extract_functions(transform, lookup(panel).member_names)


def extract_rotate(transform: StyleValue | None) -> dict[str, FunctionValue | None]:
    return extract_group(Panel.ROTATE, transform)


def extract_skew(transform: StyleValue | None) -> dict[str, FunctionValue | None]:
    return extract_group(Panel.SKEW, transform)
