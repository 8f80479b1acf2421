"""Read-only derived views (roster hierarchy, share view)."""

from .hierarchy import (
    CATEGORY_ORDER,
    POSITION_CATEGORIES,
    STATUS_LABELS,
    HierarchyEntry,
    HierarchyGroup,
    RosterHierarchy,
    RosterSummary,
    StatusBadge,
    build_hierarchy,
    categorize,
    display_number,
    entry_numbers,
    roster_summary,
    sort_by_entry_order,
    status_badge,
)
from .share import (
    SharedPlayer,
    ShareView,
    build_share_view,
    categorize_slot,
    decode_share_assignment,
    encode_share_query,
    share_role_label,
)

__all__ = [
    "CATEGORY_ORDER",
    "POSITION_CATEGORIES",
    "STATUS_LABELS",
    "HierarchyEntry",
    "HierarchyGroup",
    "RosterHierarchy",
    "RosterSummary",
    "StatusBadge",
    "build_hierarchy",
    "categorize",
    "display_number",
    "entry_numbers",
    "roster_summary",
    "sort_by_entry_order",
    "status_badge",
    "SharedPlayer",
    "ShareView",
    "build_share_view",
    "categorize_slot",
    "decode_share_assignment",
    "encode_share_query",
    "share_role_label",
]
