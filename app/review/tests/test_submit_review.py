import pytest
from common.application.result import Err, Ok
from company.models import Company
from django.db import IntegrityError
from review.adapters.django_review_repo import DjangoReviewRepository
from review.models import Review
from review.services import ReviewService
from review.tests.helpers import assert_rating_cache_consistent


@pytest.mark.django_db
class TestSubmitReview:
    def test_verified_author_is_published_and_cache_updated(
        self, make_user, make_company, review_payload
    ):
        """재직 인증 사용자의 리뷰는 즉시 공개되고 평점 캐시가 갱신된다"""
        # Given
        company = make_company()
        author = make_user(verified=True)

        # When
        result = ReviewService.submit_review(
            company_id=company.id, author_id=author.id, payload=review_payload
        )

        # Then
        assert isinstance(result, Ok)
        assert result.value.published is True
        assert result.value.message == "Review submitted successfully"
        assert result.value.review.status.value == "approved"
        assert result.value.review.is_verified is True

        company.refresh_from_db()
        assert company.rating_average == 5.0
        assert company.rating_count == 1
        assert company.rating_distribution["5"] == 1
        assert company.rating_updated_at is not None
        assert_rating_cache_consistent(company.id)

    def test_unverified_author_is_pending_and_cache_untouched(
        self, make_user, make_company, review_payload
    ):
        """미인증 사용자의 리뷰는 승인 대기이며 캐시는 변하지 않는다"""
        company = make_company()
        author = make_user(verified=False)

        result = ReviewService.submit_review(
            company_id=company.id, author_id=author.id, payload=review_payload
        )

        assert isinstance(result, Ok)
        assert result.value.published is False
        assert result.value.message == "Review submitted and pending approval"
        assert Review.objects.get(pk=result.value.review.id).status == "pending"

        company.refresh_from_db()
        assert company.rating_count == 0
        assert company.rating_average == 0.0
        assert company.rating_updated_at is None

    def test_content_is_trimmed_and_optional_fields_default(
        self, make_user, make_company
    ):
        company = make_company()
        author = make_user()

        result = ReviewService.submit_review(
            company_id=company.id,
            author_id=author.id,
            payload={
                "rating": 2,
                "title": "  Meh  ",
                "content": "   Too many meetings every day.   ",
                "is_anonymous": True,
            },
        )

        assert isinstance(result, Ok)
        review = Review.objects.get(pk=result.value.review.id)
        assert review.title == "Meh"
        assert review.content == "Too many meetings every day."
        assert review.pros == ""
        assert review.cons == ""
        assert review.is_anonymous is True
        # 익명이어도 실제 작성자는 저장
        assert review.author_id == author.id

    def test_missing_company_returns_not_found(self, make_user, review_payload):
        author = make_user(verified=True)

        result = ReviewService.submit_review(
            company_id=999999, author_id=author.id, payload=review_payload
        )

        assert isinstance(result, Err)
        assert result.code == "NOT_FOUND"
        assert Review.objects.count() == 0

    def test_missing_author_returns_not_found(self, make_company, review_payload):
        company = make_company()

        result = ReviewService.submit_review(
            company_id=company.id, author_id=999999, payload=review_payload
        )

        assert isinstance(result, Err)
        assert result.code == "NOT_FOUND"

    def test_second_review_by_same_author_conflicts(
        self, make_user, make_company, review_payload
    ):
        """같은 회사에 두 번째 리뷰는 CONFLICT"""
        company = make_company()
        author = make_user(verified=True)

        first = ReviewService.submit_review(
            company_id=company.id, author_id=author.id, payload=review_payload
        )
        second = ReviewService.submit_review(
            company_id=company.id,
            author_id=author.id,
            payload={**review_payload, "rating": 1},
        )

        assert isinstance(first, Ok)
        assert isinstance(second, Err)
        assert second.code == "CONFLICT"
        assert second.message == "You have already reviewed this company"
        assert Review.objects.filter(company=company, author=author).count() == 1
        assert_rating_cache_consistent(company.id)

    def test_same_author_can_review_different_companies(
        self, make_user, make_company, review_payload
    ):
        author = make_user()

        for company in (make_company(), make_company()):
            result = ReviewService.submit_review(
                company_id=company.id, author_id=author.id, payload=review_payload
            )
            assert isinstance(result, Ok)

    def test_race_loser_gets_conflict_from_unique_constraint(
        self, make_user, make_company, review_payload, monkeypatch
    ):
        """중복 확인을 통과한 동시 요청도 유니크 제약으로 CONFLICT"""
        # Given: 다른 요청이 이미 저장했지만 exists 검사 시점에는 보이지 않았던 상황
        company = make_company()
        author = make_user(verified=True)
        Review.objects.create(
            company=company,
            author=author,
            rating=3,
            title="Earlier",
            content="Submitted by a concurrent request.",
            status="approved",
        )
        monkeypatch.setattr(
            DjangoReviewRepository, "exists_for_author", lambda self, **kw: False
        )

        # When
        result = ReviewService.submit_review(
            company_id=company.id, author_id=author.id, payload=review_payload
        )

        # Then
        assert isinstance(result, Err)
        assert result.code == "CONFLICT"
        assert Review.objects.filter(company=company, author=author).count() == 1

    def test_validation_errors_have_field_details(self, make_user, make_company):
        company = make_company()
        author = make_user()

        result = ReviewService.submit_review(
            company_id=company.id,
            author_id=author.id,
            payload={"rating": 0, "title": "ab", "content": "short"},
        )

        assert isinstance(result, Err)
        assert result.code == "VALIDATION_ERROR"
        assert {"rating", "title", "content"} <= set(result.details)
        assert Review.objects.count() == 0

    def test_boolean_rating_is_rejected(
        self, make_user, make_company, review_payload
    ):
        company = make_company()
        author = make_user()

        result = ReviewService.submit_review(
            company_id=company.id,
            author_id=author.id,
            payload=dict(review_payload, rating=True),
        )

        assert isinstance(result, Err)
        assert result.code == "VALIDATION_ERROR"
        assert "rating" in result.details
        assert Review.objects.count() == 0

    def test_cache_write_failure_rolls_back_review(
        self, make_user, make_company, review_payload, monkeypatch
    ):
        """캐시 기록이 실패하면 리뷰 생성도 롤백된다"""
        from company.adapters.django_company_repo import DjangoCompanyRepository

        company = make_company()
        author = make_user(verified=True)

        def broken_save_rating(self, **kwargs):
            raise IntegrityError("cache write failed")

        monkeypatch.setattr(DjangoCompanyRepository, "save_rating", broken_save_rating)

        with pytest.raises(IntegrityError):
            ReviewService.submit_review(
                company_id=company.id, author_id=author.id, payload=review_payload
            )

        assert Review.objects.count() == 0
        assert Company.objects.get(pk=company.id).rating_count == 0
