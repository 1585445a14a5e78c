"""Serializers: convert Transfer state to JSON for external renderers."""

from __future__ import annotations

import json
from typing import Any, TYPE_CHECKING

from ..core.direction import LEFT, RIGHT

if TYPE_CHECKING:
    from ..api import Transfer


def serialize_pane(transfer: Transfer, pane: str) -> dict[str, Any]:
    """One pane's render data: items, checked keys and screen side."""
    items = transfer.partition.items(pane)
    checked = transfer.checked_keys(pane)
    return {
        "direction": transfer.list_side(pane),
        "itemKeys": [item.get("key") for item in items],
        "disabledKeys": [item.get("key") for item in items if item.get("disabled")],
        "checkedKeys": checked,
        "showRemove": pane == RIGHT and transfer.one_way,
        "selectedCount": len(checked),
        "totalCount": len(items),
    }


def serialize_operation(transfer: Transfer) -> dict[str, Any]:
    """Move-button state."""
    return {
        "rightActive": transfer.right_active,
        "leftActive": transfer.left_active,
        "oneWay": transfer.one_way,
        "disabled": transfer.disabled,
    }


def serialize_view(transfer: Transfer, **extra: Any) -> str:
    """Serialize the full view model as a JSON string."""
    view = {
        "source": serialize_pane(transfer, LEFT),
        "target": serialize_pane(transfer, RIGHT),
        "operation": serialize_operation(transfer),
        "rtl": transfer.layout_direction == "rtl",
        **extra,
    }
    return json.dumps(view, default=str)
