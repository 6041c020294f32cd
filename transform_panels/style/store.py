"""In-memory style store — named properties mapped to value trees.

Absent key means "not configured", which is distinct from a configured value
whose ``hidden`` flag is set.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from transform_panels.css.parser import parse_css_value
from transform_panels.css.serializer import to_value
from transform_panels.models.values import StyleValue

logger = logging.getLogger(__name__)


class StyleSource(Protocol):
    """What the panel operations need from a store."""

    def get(self, name: str) -> StyleValue | None: ...

    def set(self, name: str) -> Callable[[StyleValue], None]: ...

    def delete(self, name: str) -> None: ...


class StyleStore:
    def __init__(self, values: dict[str, StyleValue] | None = None) -> None:
        self._values: dict[str, StyleValue] = dict(values or {})

    @classmethod
    def from_css(cls, declarations: dict[str, str]) -> StyleStore:
        """Build a store from ``property -> CSS text`` pairs.

        Raises CssParseError on the first value that does not parse.
        """
        return cls({name: parse_css_value(name, text) for name, text in declarations.items()})

    def get(self, name: str) -> StyleValue | None:
        return self._values.get(name)

    def set(self, name: str) -> Callable[[StyleValue], None]:
        def setter(value: StyleValue) -> None:
            self._values[name] = value
            logger.debug("Set %s = %r", name, to_value(value))

        return setter

    def delete(self, name: str) -> None:
        if self._values.pop(name, None) is not None:
            logger.debug("Deleted %s", name)

    def snapshot(self) -> dict[str, StyleValue]:
        return dict(self._values)

    def to_css(self) -> dict[str, str]:
        """Serialize every property; hidden values come out as empty text."""
        return {name: to_value(value) for name, value in self._values.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)
