"""Tests for the panel registry."""

from __future__ import annotations

import pytest

from transform_panels.transforms.registry import Panel, all_panels, group_rank, lookup


def test_own_property_panels():
    for panel in ("translate", "scale"):
        spec = lookup(panel)
        assert spec.own_property == panel
        assert spec.member_names == ()
        assert not spec.is_function_panel


def test_function_panels():
    rotate = lookup(Panel.ROTATE)
    assert rotate.own_property is None
    assert rotate.member_names == ("rotateX", "rotateY", "rotateZ")
    assert lookup("skew").member_names == ("skewX", "skewY")


def test_all_panels():
    assert {spec.id for spec in all_panels()} == set(Panel)


def test_unknown_panel_fails_fast():
    with pytest.raises(ValueError):
        lookup("perspective")


def test_skew_ranks_before_rotate():
    assert group_rank("skewY") < group_rank("rotateX")
    assert group_rank("skew") is None
    assert group_rank("translate") is None
