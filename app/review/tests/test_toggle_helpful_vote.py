import pytest
from common.application.result import Err, Ok
from review.adapters.django_review_repo import DjangoReviewRepository
from review.models import HelpfulVote
from review.services import ReviewService
from review.tests.helpers import assert_rating_cache_consistent


@pytest.mark.django_db
class TestToggleHelpfulVote:
    def test_first_toggle_marks_helpful(self, make_user, make_company, make_review):
        review = make_review(company=make_company(), author=make_user())
        voter = make_user()

        result = ReviewService.toggle_helpful(review_id=review.id, user_id=voter.id)

        assert isinstance(result, Ok)
        assert result.value.is_helpful is True
        assert result.value.helpful_count == 1
        assert result.value.message == "Marked review as helpful"
        assert HelpfulVote.objects.filter(review=review, user=voter).exists()

    def test_toggle_is_idempotent_in_pairs(self, make_user, make_company, make_review):
        """두 번 토글하면 원래 상태와 개수로 돌아온다"""
        review = make_review(company=make_company(), author=make_user())
        other = make_user()
        HelpfulVote.objects.create(review=review, user=other)
        voter = make_user()

        first = ReviewService.toggle_helpful(review_id=review.id, user_id=voter.id)
        second = ReviewService.toggle_helpful(review_id=review.id, user_id=voter.id)

        assert first.value.is_helpful is True
        assert first.value.helpful_count == 2
        assert second.value.is_helpful is False
        assert second.value.helpful_count == 1
        assert second.value.message == "Removed helpful mark"
        assert list(
            HelpfulVote.objects.filter(review=review).values_list("user_id", flat=True)
        ) == [other.id]

    def test_votes_from_different_users_accumulate(
        self, make_user, make_company, make_review
    ):
        review = make_review(company=make_company(), author=make_user())

        counts = [
            ReviewService.toggle_helpful(
                review_id=review.id, user_id=make_user().id
            ).value.helpful_count
            for _ in range(3)
        ]

        assert counts == [1, 2, 3]

    def test_author_cannot_vote_on_own_review(
        self, make_user, make_company, make_review
    ):
        author = make_user()
        review = make_review(company=make_company(), author=author)

        result = ReviewService.toggle_helpful(review_id=review.id, user_id=author.id)

        assert isinstance(result, Err)
        assert result.code == "INVALID_OPERATION"
        assert result.message == "You cannot vote on your own review"
        assert HelpfulVote.objects.count() == 0

    def test_missing_review(self, make_user):
        result = ReviewService.toggle_helpful(review_id=987654, user_id=make_user().id)

        assert isinstance(result, Err)
        assert result.code == "NOT_FOUND"

    def test_concurrent_double_insert_keeps_single_vote(
        self, make_user, make_company, make_review, monkeypatch
    ):
        """같은 사용자의 동시 요청: 먼저 들어간 행이 있으면 유니크 제약으로 하나만 유지"""
        review = make_review(company=make_company(), author=make_user())
        voter = make_user()
        HelpfulVote.objects.create(review=review, user=voter)
        # 삭제 시점에는 아직 행이 보이지 않았던 상황을 흉내
        monkeypatch.setattr(
            DjangoReviewRepository, "remove_helpful_vote", lambda self, **kw: False
        )

        result = ReviewService.toggle_helpful(review_id=review.id, user_id=voter.id)

        assert isinstance(result, Ok)
        assert result.value.is_helpful is True
        assert result.value.helpful_count == 1

    def test_helpful_votes_do_not_touch_rating_cache(
        self, make_user, make_company, review_payload
    ):
        company = make_company()
        submitted = ReviewService.submit_review(
            company_id=company.id,
            author_id=make_user(verified=True).id,
            payload=review_payload,
        )
        company.refresh_from_db()
        refreshed_at = company.rating_updated_at

        ReviewService.toggle_helpful(
            review_id=submitted.value.review.id, user_id=make_user().id
        )

        company.refresh_from_db()
        assert company.rating_updated_at == refreshed_at
        assert_rating_cache_consistent(company.id)
