"""
Thread grouping for the dashboard comment listing.

- Resolved comments are not listed.
- Comments are ordered by creation time, oldest first.
- Top-level comments are grouped per dashboard tile.
- Replies are nested under the root comment of their reply chain, so a reply
  to a reply lands in the same thread as its ancestor.
- A reply whose chain does not reach a listed root is dropped.
"""

from typing import Iterable, Optional

from dashcomments.domain.entities.comment import Comment
from dashcomments.domain.value_objects.user_uuid import UserUuid


def _find_root(comment: Comment, by_id: dict[str, Comment]) -> Optional[Comment]:
    current = comment
    visited: set[str] = set()
    while current.reply_to is not None:
        if current.comment_id.value in visited:
            return None  # cycle
        visited.add(current.comment_id.value)
        parent = by_id.get(current.reply_to.value)
        if parent is None:
            return None
        current = parent
    return current


def group_comments_by_tile(
    comments: Iterable[Comment],
    viewer_uuid: UserUuid,
    can_remove_any: bool,
) -> dict[str, list[Comment]]:
    listed = sorted(
        (c for c in comments if not c.resolved), key=lambda c: c.created_at
    )
    by_id = {c.comment_id.value: c for c in listed}

    for comment in listed:
        comment.can_remove = can_remove_any or comment.user_uuid == viewer_uuid
        comment.replies = []

    grouped: dict[str, list[Comment]] = {}
    for comment in listed:
        if comment.reply_to is None:
            grouped.setdefault(comment.dashboard_tile_uuid, []).append(comment)
            continue
        root = _find_root(comment, by_id)
        if root is not None:
            root.replies.append(comment)

    return grouped
