"""Presenters for repository objects."""

from rdftypes.presenters.badge import (
    Badge,
    PermissionBadge,
    VISIBILITY_AUTHENTICATED,
    VISIBILITY_OPEN,
    VISIBILITY_RESTRICTED,
)

__all__ = [
    "Badge",
    "PermissionBadge",
    "VISIBILITY_AUTHENTICATED",
    "VISIBILITY_OPEN",
    "VISIBILITY_RESTRICTED",
]
