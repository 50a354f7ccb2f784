"""
Drag-and-drop ordering helpers.

The admin UI reorders an in-memory copy and persists the whole order at once,
either as an ordered array or as explicit {id, display_order} pairs. There is
no conflict detection: the last write wins.
"""
from __future__ import annotations

from typing import Any, Iterable, Sequence, TypeVar

T = TypeVar("T")


def move_item(items: Sequence[T], source: int, destination: int) -> list[T]:
    """Remove the element at `source` and insert it at `destination`."""
    n = len(items)
    if not (0 <= source < n) or not (0 <= destination < n):
        raise IndexError(f"move {source} -> {destination} out of range for {n} items")
    out = list(items)
    item = out.pop(source)
    out.insert(destination, item)
    return out


def to_display_order(ids: Iterable[Any]) -> list[dict[str, Any]]:
    """[id, ...] -> [{id, display_order}] numbered from 1 in list order."""
    return [{"id": item_id, "display_order": i} for i, item_id in enumerate(ids, start=1)]


def apply_display_order(rows: Iterable[Any], pairs: Iterable[dict[str, Any]], attr: str = "display_order") -> int:
    """
    Write display_order values from `pairs` onto ORM rows matched by id.
    Ids not present in `rows` are ignored. Returns the number of rows updated.
    """
    by_id = {row.id: row for row in rows}
    updated = 0
    for pair in pairs:
        row = by_id.get(pair["id"])
        if row is None:
            continue
        setattr(row, attr, pair["display_order"])
        updated += 1
    return updated
