"""Parsing of the ``[{menu_item_id, quantity}]`` lists carried on commands."""

import json

from protean.exceptions import ValidationError


def parse_line_items(raw, field="items") -> list[dict]:
    """Decode and validate a list of menu item lines.

    Raises ``ValidationError`` for an empty list, a missing menu item id or a
    quantity that is not a positive integer. Nothing is persisted before this
    check runs.
    """
    lines = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(lines, list) or not lines:
        raise ValidationError({field: ["At least one item is required"]})

    parsed = []
    for position, line in enumerate(lines):
        if not isinstance(line, dict):
            raise ValidationError({field: [f"Item {position} must be an object"]})

        menu_item_id = line.get("menu_item_id")
        quantity = line.get("quantity")
        if not menu_item_id:
            raise ValidationError({field: [f"Item {position} is missing menu_item_id"]})
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({field: [f"Item {position} quantity must be a positive integer"]})

        parsed.append({"menu_item_id": str(menu_item_id), "quantity": quantity})
    return parsed


def merge_line_items(lines: list[dict]) -> list[dict]:
    """Collapse repeated menu item ids into one line, summing quantities."""
    merged = {}
    for line in lines:
        if line["menu_item_id"] in merged:
            merged[line["menu_item_id"]]["quantity"] += line["quantity"]
        else:
            merged[line["menu_item_id"]] = dict(line)
    return list(merged.values())
