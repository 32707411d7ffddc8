# SPDX-License-Identifier: MIT

from plangrid.model.item_kind import ItemKind
from plangrid.model.scheduled_item import ScheduledItem

# Default colors per item kind when an item carries none
KIND_COLORS = {
    ItemKind.PLAN: "bright_blue",
    ItemKind.RECORD: "spring_green",
}
FALLBACK_COLOR = "white"

# Drafts are shown dimmed on top of their regular color
DRAFT_STYLE = "dim"


def item_style(item: ScheduledItem) -> str:
    """Return the Rich style used to display an item."""
    color = item.get("color") or KIND_COLORS.get(item["kind"], FALLBACK_COLOR)
    if item.get("is_draft"):
        return f"{DRAFT_STYLE} {color}"
    return color
