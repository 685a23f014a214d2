"""Unit tests for the engagement aggregate."""

from uuid import uuid4

import pytest

from letsconnect.domain.error import (
    EngagementDisabledError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from letsconnect.domain.model import recompute_counts
from letsconnect.domain.value import AllowFlag, CommentId, UserId
from tests.conftest import make_event, make_post


def assert_counts_consistent(entity):
    likes_count, comments_count = recompute_counts(entity)
    assert entity.likes_count == likes_count
    assert entity.comments_count == comments_count


class TestComments:
    """Tests for adding, editing and deleting comments."""

    def test_add_comment_counts_one(self):
        """A fresh comment counts once."""
        # Arrange
        post = make_post()
        author = UserId(uuid4())

        # Act
        updated, comment = post.add_comment(author, "  first!  ")

        # Assert
        assert updated.comments_count == 1
        assert comment.content == "first!"
        assert comment.owner_id == author
        assert post.comments == []  # receiver untouched

    def test_add_comment_rejected_when_comments_disabled(self):
        """Disabled comments reject the add and leave comments unchanged."""
        # Arrange
        post, _ = make_post().toggle_allow(AllowFlag.COMMENTS)

        # Act / Assert
        with pytest.raises(EngagementDisabledError):
            post.add_comment(UserId(uuid4()), "hello")
        assert post.comments == []
        assert post.comments_count == 0

    def test_add_comment_rejects_empty_and_too_long(self):
        """Post comments are 1 to 100 characters after trimming."""
        post = make_post()

        with pytest.raises(InvalidInputError):
            post.add_comment(UserId(uuid4()), "   ")
        with pytest.raises(InvalidInputError):
            post.add_comment(UserId(uuid4()), "x" * 101)

    def test_event_comments_allow_longer_text(self):
        """Event comments accept up to 255 characters."""
        event = make_event()

        updated, comment = event.add_comment(UserId(uuid4()), "x" * 255)

        assert len(comment.content) == 255
        assert updated.comments_count == 1

    def test_edit_comment_by_owner(self):
        """The author can change the comment text."""
        # Arrange
        author = UserId(uuid4())
        post, comment = make_post().add_comment(author, "draft")

        # Act
        updated = post.edit_comment(comment.id, author, "final")

        # Assert
        assert updated.find_comment(comment.id).content == "final"
        assert updated.comments_count == 1

    def test_edit_comment_by_other_user_is_forbidden(self):
        """Only the author may edit, even the entity owner may not."""
        post_owner = UserId(uuid4())
        post, comment = make_post(owner_id=post_owner).add_comment(
            UserId(uuid4()), "mine"
        )

        with pytest.raises(NotAuthorizedError):
            post.edit_comment(comment.id, post_owner, "hijacked")

    def test_delete_comment_by_stranger_is_forbidden(self):
        """A non-owner without moderation rights gets NotAuthorizedError."""
        # Arrange
        post, comment = make_post().add_comment(UserId(uuid4()), "keep me")

        # Act / Assert
        with pytest.raises(NotAuthorizedError):
            post.delete_comment(comment.id, UserId(uuid4()), can_moderate=False)
        assert post.find_comment(comment.id) == comment

    def test_delete_comment_by_moderator(self):
        """Moderation rights allow deleting someone else's comment."""
        post, comment = make_post().add_comment(UserId(uuid4()), "spam")

        updated = post.delete_comment(comment.id, UserId(uuid4()), can_moderate=True)

        assert updated.comments == []
        assert updated.comments_count == 0

    def test_unknown_comment_is_not_found(self):
        post = make_post()

        with pytest.raises(NotFoundError):
            post.find_comment(CommentId(uuid4()))


class TestReplies:
    """Tests for replies nested under comments."""

    def test_reply_then_delete_parent_scenario(self):
        """0 comments, add comment gives 1, add reply gives 2, delete parent gives 0."""
        # Arrange
        author = UserId(uuid4())
        post = make_post()
        assert post.comments_count == 0

        # Act
        post, comment = post.add_comment(author, "parent")
        after_comment = post.comments_count
        post, _ = post.add_reply(comment.id, UserId(uuid4()), "child")
        after_reply = post.comments_count
        post = post.delete_comment(comment.id, author, can_moderate=False)

        # Assert
        assert after_comment == 1
        assert after_reply == 2
        assert post.comments_count == 0

    def test_reply_text_is_bounded(self):
        """Replies are 1 to 255 characters."""
        post, comment = make_post().add_comment(UserId(uuid4()), "parent")

        with pytest.raises(InvalidInputError):
            post.add_reply(comment.id, UserId(uuid4()), "")
        with pytest.raises(InvalidInputError):
            post.add_reply(comment.id, UserId(uuid4()), "r" * 256)

    def test_edit_and_delete_reply(self):
        """Reply authors edit their reply; the comment owner may not edit it."""
        # Arrange
        replier = UserId(uuid4())
        post, comment = make_post().add_comment(UserId(uuid4()), "parent")
        post, reply = post.add_reply(comment.id, replier, "first take")

        # Act
        edited = post.edit_reply(comment.id, reply.id, replier, "second take")
        deleted = edited.delete_reply(comment.id, reply.id, replier, can_moderate=False)

        # Assert
        assert edited.find_comment(comment.id).find_reply(reply.id).reply == "second take"
        assert deleted.find_comment(comment.id).replies == []
        assert deleted.comments_count == 1

    def test_delete_reply_by_stranger_is_forbidden(self):
        post, comment = make_post().add_comment(UserId(uuid4()), "parent")
        post, reply = post.add_reply(comment.id, UserId(uuid4()), "child")

        with pytest.raises(NotAuthorizedError):
            post.delete_reply(comment.id, reply.id, UserId(uuid4()), can_moderate=False)

    def test_count_invariant_after_mixed_sequence(self):
        """comments_count always equals comments plus replies."""
        # Arrange
        users = [UserId(uuid4()) for _ in range(3)]
        post = make_post()

        # Act
        post, c1 = post.add_comment(users[0], "one")
        post, c2 = post.add_comment(users[1], "two")
        post, r1 = post.add_reply(c1.id, users[2], "re one")
        post, _ = post.add_reply(c1.id, users[1], "re one again")
        post, _ = post.add_reply(c2.id, users[0], "re two")
        post = post.delete_reply(c1.id, r1.id, users[2], can_moderate=False)
        post = post.delete_comment(c2.id, users[1], can_moderate=False)

        # Assert
        assert post.comments_count == 2
        assert_counts_consistent(post)


class TestLikes:
    """Tests for like toggles on every level."""

    def test_double_toggle_restores_state(self):
        """Like then unlike returns to no likes."""
        # Arrange
        user = UserId(uuid4())
        post = make_post()

        # Act
        liked_post, liked = post.toggle_like(user)
        restored, liked_again = liked_post.toggle_like(user)

        # Assert
        assert liked is True
        assert liked_post.likes == [user]
        assert liked_post.likes_count == 1
        assert liked_again is False
        assert restored.likes == []
        assert restored.likes_count == 0

    def test_comment_and_reply_likes(self):
        """Comment and reply likes do not touch the entity like count."""
        # Arrange
        user = UserId(uuid4())
        post, comment = make_post().add_comment(UserId(uuid4()), "parent")
        post, reply = post.add_reply(comment.id, UserId(uuid4()), "child")

        # Act
        post, comment_liked = post.toggle_comment_like(comment.id, user)
        post, reply_liked = post.toggle_reply_like(comment.id, reply.id, user)

        # Assert
        assert comment_liked is True
        assert reply_liked is True
        assert post.find_comment(comment.id).likes == [user]
        assert post.find_comment(comment.id).find_reply(reply.id).likes == [user]
        assert post.likes_count == 0


class TestSharesAndGates:
    """Tests for shares and allow flags."""

    def test_share_counts_every_call(self):
        """The same user may share repeatedly."""
        post = make_post()

        shared = post.share().share()

        assert shared.shares == 2

    def test_share_rejected_when_disabled(self):
        post, allowed = make_post().toggle_allow(AllowFlag.SHARES)

        assert allowed is False
        with pytest.raises(EngagementDisabledError):
            post.share()

    def test_toggle_allow_is_a_flip(self):
        """Two flips restore the original flag."""
        post = make_post()

        off, first = post.toggle_allow(AllowFlag.COMMENTS)
        on, second = off.toggle_allow(AllowFlag.COMMENTS)

        assert (first, second) == (False, True)
        assert on.allow_comments is True
