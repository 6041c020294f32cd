"""Panel registry — which style state each transform panel owns.

Own-property panels (translate, scale) keep a 3-axis tuple under their own
property. Function panels (rotate, skew) own a fixed set of named functions
inside the shared ``transform`` list.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Panel(str, enum.Enum):
    TRANSLATE = "translate"
    SCALE = "scale"
    ROTATE = "rotate"
    SKEW = "skew"


TRANSFORM_PROPERTY = "transform"


@dataclass(frozen=True)
class PanelSpec:
    id: Panel
    own_property: str | None = None
    member_names: tuple[str, ...] = ()

    @property
    def is_function_panel(self) -> bool:
        return self.own_property is None


_PANELS: dict[Panel, PanelSpec] = {
    Panel.TRANSLATE: PanelSpec(id=Panel.TRANSLATE, own_property="translate"),
    Panel.SCALE: PanelSpec(id=Panel.SCALE, own_property="scale"),
    Panel.ROTATE: PanelSpec(id=Panel.ROTATE, member_names=("rotateX", "rotateY", "rotateZ")),
    Panel.SKEW: PanelSpec(id=Panel.SKEW, member_names=("skewX", "skewY")),
}

# Where a function panel's block goes when it has no entries yet: earlier
# panels sit closer to the start of the transform list.
FUNCTION_PRECEDENCE: tuple[Panel, ...] = (Panel.SKEW, Panel.ROTATE)

_RANK_BY_NAME: dict[str, int] = {
    name: rank
    for rank, panel in enumerate(FUNCTION_PRECEDENCE)
    for name in _PANELS[panel].member_names
}


def lookup(panel: Panel | str) -> PanelSpec:
    """Spec for a panel id. Unknown ids raise ValueError."""
    return _PANELS[Panel(panel)]


def all_panels() -> list[PanelSpec]:
    return list(_PANELS.values())


def group_rank(function_name: str) -> int | None:
    """Precedence rank of the function panel owning ``function_name``."""
    return _RANK_BY_NAME.get(function_name)
