"""Splice a panel's functions into the shared transform list.

Only the panel's own (managed) entries are replaced. Every other entry keeps
its place, so panels editing the same list never reorder each other.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from transform_panels.models.values import FunctionValue, StyleValue, TupleValue
from transform_panels.transforms.extraction import is_member, transform_items
from transform_panels.transforms.registry import group_rank

logger = logging.getLogger(__name__)


def splice_group(
    transform: StyleValue | None,
    member_names: Sequence[str],
    new_values: Mapping[str, FunctionValue | None],
) -> TupleValue:
    """Rebuild ``transform`` with the group's block at its anchor.

    The block lists member names in order: the new value when one is given,
    else the existing entry, else nothing. The anchor is where the group's
    first entry already sits; a group with no entries goes to its canonical
    position (see ``_default_position``).
    """
    items = transform_items(transform)

    existing: dict[str, FunctionValue] = {}
    anchor: int | None = None
    for index, item in enumerate(items):
        if is_member(item, member_names):
            existing.setdefault(item.name, item)
            if anchor is None:
                anchor = index

    block: list[StyleValue] = []
    for name in member_names:
        value = new_values.get(name) or existing.get(name)
        if value is not None:
            block.append(value)

    foreign = [item for item in items if not is_member(item, member_names)]
    # Items before the first managed entry are all foreign, so an existing
    # anchor indexes ``foreign`` unchanged.
    if anchor is None:
        anchor = _default_position(foreign, member_names)

    rebuilt = foreign[:anchor] + block + foreign[anchor:]
    logger.debug("Spliced %s at %d: %d items", "/".join(member_names), anchor, len(rebuilt))

    hidden = transform.hidden if isinstance(transform, TupleValue) else False
    return TupleValue(value=rebuilt, hidden=hidden)


def _default_position(items: list[StyleValue], member_names: Sequence[str]) -> int:
    """Insert before the first later-ranked group, else after the last
    earlier-ranked group, else at the end."""
    rank = group_rank(member_names[0]) if member_names else None
    if rank is None:
        return len(items)

    ranks = [group_rank(item.name) if isinstance(item, FunctionValue) else None for item in items]

    for index, other in enumerate(ranks):
        if other is not None and other > rank:
            return index

    for index in range(len(ranks) - 1, -1, -1):
        other = ranks[index]
        if other is not None and other < rank:
            return index + 1

    return len(items)
