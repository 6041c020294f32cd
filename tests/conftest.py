"""Shared test fixtures."""

from __future__ import annotations

import pytest

from transform_panels.style.store import StyleStore


# Sample transform lists

ROTATE_THEN_FOREIGN = "rotateX(50deg) rotateY(50deg) rotateZ(50deg) scale(1, 1) translate(10px, 10px)"

ROTATE_THEN_SKEW = "rotateX(10deg) rotateY(10deg) rotateZ(10deg) skewX(10deg) skewY(10deg)"

ROTATE_WITH_SKEW_SHORTHAND = "rotateX(50deg) rotateY(50deg) rotateZ(50deg) skew(10deg) skewX(10deg) skewY(10deg)"

FOREIGN_AROUND_ROTATE = "scale(2) rotateY(30deg) translate(5px, 5px) rotateX(15deg) perspective(100px)"


@pytest.fixture
def store() -> StyleStore:
    return StyleStore()


@pytest.fixture
def rotate_then_skew_store() -> StyleStore:
    return StyleStore.from_css({"transform": ROTATE_THEN_SKEW})
