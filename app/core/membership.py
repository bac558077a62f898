# Two-state transition shared by the follow/unfollow and like/unlike toggles.
# The caller passes the current membership and applies the returned change;
# applying it twice restores the starting state.

from enum import Enum


class Membership(str, Enum):
    ADDED = "added"
    REMOVED = "removed"


def toggle(is_member: bool) -> Membership:
    """Return the change a toggle makes given the current membership"""
    return Membership.REMOVED if is_member else Membership.ADDED
