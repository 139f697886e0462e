from datetime import datetime, timedelta, timezone

import pytest

from dashcomments.domain.entities import Comment
from dashcomments.domain.exceptions import DomainValidationError
from dashcomments.domain.services.comment_threads import group_comments_by_tile
from dashcomments.domain.value_objects import (
    CommentId,
    DashboardTileUuid,
    DashboardUuid,
    UserUuid,
)

DASHBOARD = DashboardUuid("30000000-0000-4000-8000-000000000001")
TILE_A = "40000000-0000-4000-8000-00000000000a"
TILE_B = "40000000-0000-4000-8000-00000000000b"
ALICE = UserUuid("50000000-0000-4000-8000-00000000a11c")
BOB = UserUuid("50000000-0000-4000-8000-000000000b0b")
START = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def _comment(minute, author=ALICE, tile=TILE_A, reply_to=None, resolved=False):
    return Comment(
        comment_id=CommentId.generate(),
        dashboard_uuid=DASHBOARD,
        dashboard_tile_uuid=tile,
        user_uuid=author,
        text=f"comment at {minute}",
        text_html=f"<p>comment at {minute}</p>",
        created_at=START + timedelta(minutes=minute),
        reply_to=reply_to.comment_id if reply_to else None,
        resolved=resolved,
    )


# ==================== ENTITY ====================


def test_create_assigns_id_timestamp_and_dedupes_mentions():
    comment = Comment.create(
        dashboard_uuid=DASHBOARD,
        dashboard_tile_uuid=TILE_A,
        user_uuid=ALICE,
        text="@bob have a look",
        text_html="<p>@bob have a look</p>",
        mentions=[BOB.value, BOB.value],
    )

    assert comment.comment_id.value
    assert comment.created_at.tzinfo is not None
    assert comment.mentions == [BOB.value]
    assert comment.has_mention
    assert not comment.is_reply
    assert comment.resolved is False


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_create_rejects_blank_text(text):
    with pytest.raises(DomainValidationError):
        Comment.create(
            dashboard_uuid=DASHBOARD,
            dashboard_tile_uuid=TILE_A,
            user_uuid=ALICE,
            text=text,
            text_html="<p></p>",
        )


def test_resolve_is_one_way():
    comment = _comment(0)

    comment.resolve()
    comment.resolve()

    assert comment.resolved is True


def test_invalid_ids_are_rejected():
    with pytest.raises(ValueError):
        DashboardUuid("not-a-uuid")
    with pytest.raises(ValueError):
        CommentId("")
    with pytest.raises(ValueError):
        UserUuid("123")
    with pytest.raises(ValueError):
        DashboardTileUuid("tile-1")


# ==================== GROUPING ====================


def test_groups_top_level_comments_by_tile_oldest_first():
    late = _comment(5, tile=TILE_A)
    early = _comment(1, tile=TILE_A)
    other = _comment(3, tile=TILE_B)

    grouped = group_comments_by_tile([late, other, early], ALICE, False)

    assert [c.comment_id for c in grouped[TILE_A]] == [early.comment_id, late.comment_id]
    assert [c.comment_id for c in grouped[TILE_B]] == [other.comment_id]


def test_replies_nest_under_the_root_of_their_chain():
    root = _comment(0)
    reply = _comment(1, author=BOB, reply_to=root)
    reply_to_reply = _comment(2, reply_to=reply)

    grouped = group_comments_by_tile([reply_to_reply, reply, root], ALICE, False)

    assert list(grouped) == [TILE_A]
    (thread,) = grouped[TILE_A]
    assert thread.comment_id == root.comment_id
    assert [r.comment_id for r in thread.replies] == [
        reply.comment_id,
        reply_to_reply.comment_id,
    ]


def test_resolved_comments_and_their_orphans_are_not_listed():
    resolved_root = _comment(0, resolved=True)
    orphan = _comment(1, reply_to=resolved_root)
    open_root = _comment(2)

    grouped = group_comments_by_tile([resolved_root, orphan, open_root], ALICE, False)

    assert [c.comment_id for c in grouped[TILE_A]] == [open_root.comment_id]
    assert grouped[TILE_A][0].replies == []


def test_can_remove_follows_authorship_unless_viewer_manages():
    mine = _comment(0, author=ALICE)
    theirs = _comment(1, author=BOB)

    grouped = group_comments_by_tile([mine, theirs], ALICE, False)
    assert [c.can_remove for c in grouped[TILE_A]] == [True, False]

    grouped = group_comments_by_tile([mine, theirs], ALICE, True)
    assert [c.can_remove for c in grouped[TILE_A]] == [True, True]


def test_empty_input_gives_empty_mapping():
    assert group_comments_by_tile([], ALICE, True) == {}
