import pytest
from user.adapters.django_user_directory import DjangoUserDirectory


@pytest.mark.django_db
class TestDjangoUserDirectory:
    def setup_method(self):
        self.directory = DjangoUserDirectory()

    def test_get_reviewer(self, make_user):
        user = make_user(verified=True)

        reviewer = self.directory.get_reviewer(user_id=user.id)

        assert reviewer is not None
        assert reviewer.user_id == user.id
        assert reviewer.is_verified is True

    def test_inactive_or_missing_user_is_not_a_reviewer(self, make_user):
        inactive = make_user(is_active=False)

        assert self.directory.get_reviewer(user_id=inactive.id) is None
        assert self.directory.get_reviewer(user_id=777777) is None

    def test_display_profiles(self, make_user):
        named = make_user(display_name="Mina", headline="Designer")
        fallback = make_user(display_name="", first_name="", last_name="")

        profiles = self.directory.get_display_profiles(
            user_ids=[named.id, fallback.id]
        )

        assert profiles[named.id].name == "Mina"
        assert profiles[named.id].title == "Designer"
        assert profiles[fallback.id].name == fallback.username

    def test_empty_ids(self):
        assert self.directory.get_display_profiles(user_ids=[]) == {}
