"""Panel operations — the entry points the transform panels call.

Each operation takes the style store explicitly, reads what it needs, and
writes back through ``store.set(name)(value)`` / ``store.delete(name)``.
Nothing is cached between calls.
"""

from __future__ import annotations

import logging

from transform_panels.models.values import (
    FunctionValue,
    LayersValue,
    StyleValue,
    TupleValue,
    UnitValue,
)
from transform_panels.style.store import StyleSource
from transform_panels.transforms.extraction import extract_functions, is_member, transform_items
from transform_panels.transforms.registry import TRANSFORM_PROPERTY, Panel, PanelSpec, lookup
from transform_panels.transforms.splice import splice_group

logger = logging.getLogger(__name__)

AXIS_COUNT = 3

_AXIS_DEFAULTS: dict[str, UnitValue] = {
    "translate": UnitValue(value=0, unit="px"),
    "scale": UnitValue(value=1, unit="number"),
}


def _default_function(name: str) -> FunctionValue:
    return FunctionValue(name=name, args=LayersValue(value=(UnitValue(value=0, unit="deg"),)))


def add_defaults(panel: Panel | str, style: StyleSource) -> None:
    """Give a panel starting values without touching ones already set."""
    spec = lookup(panel)

    if not spec.is_function_panel:
        if style.get(spec.own_property) is not None:
            return
        default = _AXIS_DEFAULTS[spec.own_property]
        style.set(spec.own_property)(TupleValue(value=(default,) * AXIS_COUNT))
        logger.debug("Added defaults for %s", spec.id.value)
        return

    transform = style.get(TRANSFORM_PROPERTY)
    current = extract_functions(transform, spec.member_names)
    missing = {name: _default_function(name) for name, value in current.items() if value is None}
    style.set(TRANSFORM_PROPERTY)(splice_group(transform, spec.member_names, missing))
    logger.debug("Added defaults for %s: %s", spec.id.value, ", ".join(missing) or "none missing")


def is_used(panel: Panel | str, style: StyleSource) -> bool:
    spec = lookup(panel)
    if not spec.is_function_panel:
        return style.get(spec.own_property) is not None
    group = extract_functions(style.get(TRANSFORM_PROPERTY), spec.member_names)
    return any(value is not None for value in group.values())


def delete(panel: Panel | str, style: StyleSource) -> None:
    """Remove a panel's values. An emptied transform list is removed too."""
    spec = lookup(panel)

    if not spec.is_function_panel:
        style.delete(spec.own_property)
        return

    transform = style.get(TRANSFORM_PROPERTY)
    foreign = [item for item in transform_items(transform) if not is_member(item, spec.member_names)]
    logger.debug("Deleting %s from transform, %d entries remain", spec.id.value, len(foreign))
    if not foreign:
        style.delete(TRANSFORM_PROPERTY)
        return

    hidden = transform.hidden if isinstance(transform, TupleValue) else False
    style.set(TRANSFORM_PROPERTY)(TupleValue(value=foreign, hidden=hidden))


def hide(panel: Panel | str, style: StyleSource) -> None:
    _set_hidden(lookup(panel), style, True)


def show(panel: Panel | str, style: StyleSource) -> None:
    _set_hidden(lookup(panel), style, False)


def _set_hidden(spec: PanelSpec, style: StyleSource, hidden: bool) -> None:
    if not spec.is_function_panel:
        value = style.get(spec.own_property)
        # a keyword such as `none` has nothing to hide
        if not isinstance(value, TupleValue):
            return
        style.set(spec.own_property)(value.model_copy(update={"hidden": hidden}))
        return

    transform = style.get(TRANSFORM_PROPERTY)
    group = {
        name: value.model_copy(update={"hidden": hidden})
        for name, value in extract_functions(transform, spec.member_names).items()
        if value is not None
    }
    if not group:
        return
    style.set(TRANSFORM_PROPERTY)(splice_group(transform, spec.member_names, group))
    logger.debug("Set hidden=%s on %s", hidden, ", ".join(group))


def update_axis_value(index: int, value: StyleValue, axes: TupleValue) -> TupleValue:
    """Copy of ``axes`` with the item at ``index`` (0=x, 1=y, 2=z) replaced."""
    if len(axes.value) != AXIS_COUNT:
        raise ValueError(f"Expected {AXIS_COUNT} axis values, got {len(axes.value)}")
    if not 0 <= index < AXIS_COUNT:
        raise IndexError(f"Axis index out of range: {index}")

    items = list(axes.value)
    items[index] = value
    return axes.model_copy(update={"value": tuple(items)})


def update_function_axis_value(
    index: int,
    panel: Panel | str,
    style: StyleSource,
    value: FunctionValue,
    group: TupleValue | None = None,
) -> TupleValue:
    """Replace one function of a panel's group and return the new transform.

    ``group`` is the panel's current functions as a tuple, in member order;
    ``index`` addresses it. Without ``group`` the functions are read from the
    store and ``index`` addresses the panel's member names. The result is not
    written, so callers can batch it with other changes.
    """
    spec = lookup(panel)
    transform = style.get(TRANSFORM_PROPERTY)

    if group is None:
        if not 0 <= index < len(spec.member_names):
            raise IndexError(f"{spec.id.value} has no member at index {index}")
        if value.name != spec.member_names[index]:
            raise ValueError(f"Expected {spec.member_names[index]}(), got {value.name}()")
        new_values = extract_functions(transform, spec.member_names)
        new_values[spec.member_names[index]] = value
    else:
        if not 0 <= index < len(group.value):
            raise IndexError(f"{spec.id.value} group has no item at index {index}")
        items = list(group.value)
        replaced = items[index]
        if not isinstance(replaced, FunctionValue) or replaced.name != value.name:
            raise ValueError(f"Cannot replace item {index} of {spec.id.value} group with {value.name}()")
        items[index] = value
        new_values = {item.name: item for item in items if isinstance(item, FunctionValue)}

    return splice_group(transform, spec.member_names, new_values)
