"""
Tests for feed visibility rules and feed construction.
"""

from types import SimpleNamespace

import pytest

from authentication.tests.factories import UserFactory
from churches.tests.factories import ChurchFactory
from social.models import Friendship, Intention
from social.services import FeedContext, FeedService, header_title, is_visible

from .factories import FriendshipFactory, IntentionFactory, make_friends, make_group


def post(user_id, visibility, selected_groups=None):
    return SimpleNamespace(
        user_id=user_id, visibility=visibility, selected_groups=selected_groups or [])


@pytest.fixture
def ctx():
    return FeedContext(
        viewer_id='me',
        friend_ids={'friend'},
        group_members={'g1': {'me', 'groupie'}},
        groups=[('g1', 'Rosary Circle')],
    )


class TestIsVisible:

    @pytest.mark.parametrize('feed_filter', ['all', 'mine', 'friends', 'groups'])
    def test_own_posts_always_visible(self, ctx, feed_filter):
        assert is_visible(post('me', Intention.JUST_ME), ctx, feed_filter)

    def test_mine_hides_everyone_else(self, ctx):
        assert not is_visible(post('friend', Intention.FRIENDS), ctx, 'mine')

    def test_just_me_hidden_from_friends(self, ctx):
        assert not is_visible(post('friend', Intention.JUST_ME), ctx, 'all')

    def test_friends_visibility(self, ctx):
        assert is_visible(post('friend', Intention.FRIENDS), ctx, 'all')
        assert not is_visible(post('groupie', Intention.FRIENDS), ctx, 'all')
        assert not is_visible(post('stranger', Intention.FRIENDS), ctx, 'all')

    def test_friends_filter_requires_friend_audience(self, ctx):
        assert is_visible(post('friend', Intention.FRIENDS_AND_GROUPS), ctx, 'friends')
        assert not is_visible(post('friend', Intention.CERTAIN_GROUPS, ['g1']), ctx, 'friends')
        assert not is_visible(post('groupie', Intention.FRIENDS_AND_GROUPS), ctx, 'friends')

    def test_certain_groups_needs_selected_group(self, ctx):
        assert is_visible(post('stranger', Intention.CERTAIN_GROUPS, ['g1']), ctx, 'all')
        assert is_visible(post('stranger', Intention.CERTAIN_GROUPS, ['g1']), ctx, 'groups')
        assert not is_visible(post('friend', Intention.CERTAIN_GROUPS, ['g9']), ctx, 'all')

    def test_certain_groups_with_empty_selection_is_private(self, ctx):
        assert not is_visible(post('friend', Intention.CERTAIN_GROUPS, []), ctx, 'all')
        assert not is_visible(post('groupie', Intention.CERTAIN_GROUPS, []), ctx, 'groups')

    def test_legacy_string_selection(self, ctx):
        assert is_visible(post('stranger', Intention.CERTAIN_GROUPS, '{g1}'), ctx, 'all')

    def test_friends_and_groups(self, ctx):
        assert is_visible(post('friend', Intention.FRIENDS_AND_GROUPS), ctx, 'all')
        assert is_visible(post('groupie', Intention.FRIENDS_AND_GROUPS), ctx, 'all')
        assert is_visible(post('groupie', Intention.FRIENDS_AND_GROUPS), ctx, 'groups')
        assert not is_visible(post('stranger', Intention.FRIENDS_AND_GROUPS), ctx, 'all')

    def test_groups_filter_rejects_friends_only_audience(self, ctx):
        assert not is_visible(post('groupie', Intention.FRIENDS), ctx, 'groups')

    def test_unknown_visibility_hidden(self, ctx):
        assert not is_visible(post('friend', 'Everyone'), ctx, 'all')


def test_header_titles():
    assert header_title('all') == 'Community'
    assert header_title('mine') == 'My Posts'
    assert header_title('friends') == 'Friends'
    assert header_title('groups') == 'Groups'
    assert header_title('bogus') == 'Community'


@pytest.mark.django_db
class TestFeedService:

    def setup_method(self):
        self.viewer = UserFactory()
        self.friend = UserFactory()
        self.groupie = UserFactory()
        self.stranger = UserFactory()
        make_friends(self.viewer, self.friend)
        self.group = make_group(self.groupie, admin=self.viewer)

    def test_friend_ids_both_directions(self):
        other = UserFactory()
        make_friends(other, self.viewer)
        FriendshipFactory(user_1=self.viewer, user_2=self.stranger, status=Friendship.PENDING)

        assert FeedService.friend_ids(self.viewer) == {str(self.friend.id), str(other.id)}

    def test_feed_all(self):
        mine = IntentionFactory(user=self.viewer, visibility=Intention.JUST_ME)
        friends = IntentionFactory(user=self.friend, visibility=Intention.FRIENDS)
        grouped = IntentionFactory(user=self.groupie, visibility=Intention.FRIENDS_AND_GROUPS)
        IntentionFactory(user=self.groupie, visibility=Intention.FRIENDS)
        IntentionFactory(user=self.stranger, visibility=Intention.FRIENDS_AND_GROUPS)
        selected = IntentionFactory(
            user=self.stranger,
            visibility=Intention.CERTAIN_GROUPS,
            selected_groups=[str(self.group.id)],
        )

        feed = FeedService.get_feed(self.viewer)

        assert {p.id for p in feed} == {mine.id, friends.id, grouped.id, selected.id}

    def test_feed_is_newest_first_with_counts(self):
        older = IntentionFactory(user=self.viewer)
        newer = IntentionFactory(user=self.viewer)
        Intention.objects.filter(pk=older.pk).update(created_at=newer.created_at.replace(year=2020))

        feed = FeedService.get_feed(self.viewer, 'mine')

        assert [p.id for p in feed] == [newer.id, older.id]
        assert feed[0].likes_count == 0
        assert feed[0].comments_count == 0
        assert feed[0].is_liked is False

    def test_type_filter(self):
        IntentionFactory(user=self.viewer, type='goal')
        IntentionFactory(user=self.viewer, type='prayer')

        feed = FeedService.get_feed(self.viewer, post_type='goal')

        assert [p.type for p in feed] == ['goal']

    def test_group_info_for_group_members(self):
        IntentionFactory(user=self.groupie, visibility=Intention.FRIENDS_AND_GROUPS)
        IntentionFactory(user=self.friend, visibility=Intention.FRIENDS)
        IntentionFactory(user=self.viewer)

        feed = {p.user_id: p for p in FeedService.get_feed(self.viewer)}

        assert feed[self.groupie.id].group_info == {
            'id': str(self.group.id), 'name': self.group.name}
        assert feed[self.friend.id].group_info is None
        assert feed[self.viewer.id].group_info is None

    def test_unknown_filter_falls_back_to_all(self):
        friends = IntentionFactory(user=self.friend)

        feed = FeedService.get_feed(self.viewer, 'everything')

        assert [p.id for p in feed] == [friends.id]

    def test_group_posts_narrowed_to_viewer_groups(self):
        other_group = make_group(admin=self.stranger)
        mine = IntentionFactory(
            user=self.stranger,
            visibility=Intention.CERTAIN_GROUPS,
            selected_groups=[str(self.group.id)],
        )
        legacy = IntentionFactory(
            user=self.stranger,
            visibility=Intention.CERTAIN_GROUPS,
            selected_groups=f'["{self.group.id}"]',
        )
        IntentionFactory(
            user=self.stranger,
            visibility=Intention.CERTAIN_GROUPS,
            selected_groups=[str(other_group.id)],
        )
        IntentionFactory(user=self.stranger, visibility=Intention.FRIENDS_AND_GROUPS)

        ctx = FeedService.build_context(self.viewer)
        matched = Intention.objects.filter(FeedService._group_posts(ctx))

        assert set(matched.values_list('id', flat=True)) == {mine.id, legacy.id}
        assert {p.id for p in FeedService.get_feed(self.viewer)} == {mine.id, legacy.id}

    def test_group_posts_empty_without_groups(self):
        IntentionFactory(
            user=self.friend,
            visibility=Intention.CERTAIN_GROUPS,
            selected_groups=[str(self.group.id)],
        )

        ctx = FeedService.build_context(self.stranger)

        assert not Intention.objects.filter(FeedService._group_posts(ctx)).exists()

    def test_church_scope(self):
        church = ChurchFactory()
        at_church = IntentionFactory(user=self.friend, church=church)
        IntentionFactory(user=self.friend)
        IntentionFactory(user=self.stranger, church=church, visibility=Intention.FRIENDS)

        feed = FeedService.get_feed(self.viewer, church=church)

        assert [p.id for p in feed] == [at_church.id]
