"""POST /api/panels/{panel}/* — run a panel operation over a submitted style.

Each request carries the whole style; the response returns it after the
operation, both as value trees and as CSS text.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from transform_panels.css.parser import CssParseError, parse_css_value
from transform_panels.models.requests import AxisUpdateRequest, StyleRequest
from transform_panels.models.responses import StyleResponse
from transform_panels.models.values import FunctionValue, TupleValue, UnitValue
from transform_panels.style.store import StyleStore
from transform_panels.transforms import operations
from transform_panels.transforms.registry import TRANSFORM_PROPERTY, Panel, lookup

router = APIRouter(prefix="/panels")
logger = logging.getLogger(__name__)


def _load_store(req: StyleRequest) -> tuple[StyleStore, dict[str, str]]:
    """Build a store from the request. CSS text that fails to parse is skipped."""
    store = StyleStore(req.style)
    errors: dict[str, str] = {}
    for name, text in req.css.items():
        try:
            store.set(name)(parse_css_value(name, text))
        except CssParseError as e:
            logger.warning("Skipping unparseable %s: %s", name, e)
            errors[name] = str(e)
    return store, errors


def _respond(panel: Panel, store: StyleStore, errors: dict[str, str]) -> StyleResponse:
    return StyleResponse(
        style=store.snapshot(),
        css=store.to_css(),
        used=operations.is_used(panel, store),
        errors=errors,
    )


@router.post("/{panel}/defaults", response_model=StyleResponse)
async def add_defaults(panel: Panel, req: StyleRequest) -> StyleResponse:
    store, errors = _load_store(req)
    operations.add_defaults(panel, store)
    return _respond(panel, store, errors)


@router.post("/{panel}/usage", response_model=StyleResponse)
async def usage(panel: Panel, req: StyleRequest) -> StyleResponse:
    store, errors = _load_store(req)
    return _respond(panel, store, errors)


@router.post("/{panel}/hide", response_model=StyleResponse)
async def hide(panel: Panel, req: StyleRequest) -> StyleResponse:
    store, errors = _load_store(req)
    operations.hide(panel, store)
    return _respond(panel, store, errors)


@router.post("/{panel}/show", response_model=StyleResponse)
async def show(panel: Panel, req: StyleRequest) -> StyleResponse:
    store, errors = _load_store(req)
    operations.show(panel, store)
    return _respond(panel, store, errors)


@router.post("/{panel}/delete", response_model=StyleResponse)
async def delete(panel: Panel, req: StyleRequest) -> StyleResponse:
    store, errors = _load_store(req)
    operations.delete(panel, store)
    return _respond(panel, store, errors)


@router.post("/{panel}/axis", response_model=StyleResponse)
async def update_axis(panel: Panel, req: AxisUpdateRequest) -> StyleResponse:
    store, errors = _load_store(req)
    spec = lookup(panel)

    if not spec.is_function_panel:
        current = store.get(spec.own_property)
        if not isinstance(current, TupleValue):
            errors[spec.own_property] = f"{panel.value} is not configured"
        elif not isinstance(req.value, UnitValue):
            errors[spec.own_property] = "axis value must be a unit"
        else:
            try:
                store.set(spec.own_property)(operations.update_axis_value(req.index, req.value, current))
            except (IndexError, ValueError) as e:
                logger.warning("Axis update on %s rejected: %s", panel.value, e)
                errors[spec.own_property] = str(e)
        return _respond(panel, store, errors)

    if not operations.is_used(panel, store):
        errors[TRANSFORM_PROPERTY] = f"{panel.value} is not configured"
    elif req.index >= len(spec.member_names):
        errors[TRANSFORM_PROPERTY] = f"{panel.value} has no member at index {req.index}"
    elif not isinstance(req.value, FunctionValue) or req.value.name != spec.member_names[req.index]:
        errors[TRANSFORM_PROPERTY] = f"expected a {spec.member_names[req.index]}() function"
    else:
        updated = operations.update_function_axis_value(req.index, panel, store, req.value)
        store.set(TRANSFORM_PROPERTY)(updated)
    return _respond(panel, store, errors)
