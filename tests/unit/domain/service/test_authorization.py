"""Unit tests for the per-kind AuthorizationPolicy."""

from uuid import uuid4

import pytest

from letsconnect.domain.error import NotAuthorizedError
from letsconnect.domain.service import AuthorizationPolicy
from letsconnect.domain.value import ContentKind, PostCategory, Role
from tests.conftest import make_event, make_gallery_post, make_post, make_principal


@pytest.fixture
def policy():
    return AuthorizationPolicy()


class TestModeration:
    """Who may delete other people's comments and replies."""

    def test_post_owner_moderates_own_post(self, policy):
        owner = make_principal()
        post = make_post(owner_id=owner.user_id)

        assert policy.can_moderate_engagement(post, owner) is True

    def test_admin_does_not_moderate_user_posts(self, policy):
        """Admins have no moderation rights on someone else's post discussion."""
        post = make_post()

        assert policy.can_moderate_engagement(post, make_principal(Role.ADMIN)) is False

    def test_admin_moderates_events(self, policy):
        event = make_event()

        assert policy.can_moderate_engagement(event, make_principal(Role.ADMIN)) is True
        assert (
            policy.can_moderate_engagement(event, make_principal(Role.POST_HANDLER))
            is False
        )

    def test_gallery_owner_moderates(self, policy):
        owner = make_principal(Role.POST_HANDLER)
        gallery_post = make_gallery_post(owner_id=owner.user_id)

        assert policy.can_moderate_engagement(gallery_post, owner) is True
        assert policy.can_moderate_engagement(gallery_post, make_principal()) is False


class TestToggleAllow:
    """Who may flip allow_comments and allow_shares."""

    def test_post_owner_may_toggle(self, policy):
        owner = make_principal()
        post = make_post(owner_id=owner.user_id)

        policy.ensure_can_toggle_allow(post, owner)

    def test_stranger_may_not_toggle_post(self, policy):
        with pytest.raises(NotAuthorizedError):
            policy.ensure_can_toggle_allow(make_post(), make_principal())

    def test_event_gates_are_for_staff(self, policy):
        """Any staff member may toggle event gates, the owner needs staff role."""
        event = make_event()

        policy.ensure_can_toggle_allow(event, make_principal(Role.POST_HANDLER))
        with pytest.raises(NotAuthorizedError):
            policy.ensure_can_toggle_allow(event, make_principal(Role.REPORT_HANDLER))


class TestManageAndCreate:
    """Entity level update, delete and create."""

    def test_user_post_is_managed_by_author_only(self, policy):
        author = make_principal()
        post = make_post(owner_id=author.user_id)

        policy.ensure_can_manage(post, author)
        with pytest.raises(NotAuthorizedError):
            policy.ensure_can_manage(post, make_principal(Role.ADMIN))

    def test_editorial_post_is_managed_by_staff(self, policy):
        post = make_post(category=PostCategory.SCIENCE)

        policy.ensure_can_manage(post, make_principal(Role.POST_HANDLER))
        with pytest.raises(NotAuthorizedError):
            policy.ensure_can_manage(post, make_principal())

    def test_users_create_only_user_posts(self, policy):
        user = make_principal()

        policy.ensure_can_create(ContentKind.POST, user, PostCategory.USERS_POST)
        with pytest.raises(NotAuthorizedError):
            policy.ensure_can_create(ContentKind.POST, user, PostCategory.POLITICS)

    @pytest.mark.parametrize("kind", [ContentKind.GALLERY, ContentKind.EVENT])
    def test_gallery_and_events_are_created_by_staff(self, policy, kind):
        policy.ensure_can_create(kind, make_principal(Role.ADMIN))
        with pytest.raises(NotAuthorizedError):
            policy.ensure_can_create(kind, make_principal(Role.USER))
