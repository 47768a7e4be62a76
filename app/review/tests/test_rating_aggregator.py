from datetime import datetime, timezone

import pytest
from company.adapters.django_company_repo import (
    CompanyRatingWriteError,
    DjangoCompanyRepository,
)
from company.models import Company
from review.adapters.django_review_repo import DjangoReviewRepository
from review.application.rating_aggregator import RatingAggregator
from review.services import ReviewService
from review.tests.helpers import assert_rating_cache_consistent

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _aggregator() -> RatingAggregator:
    return RatingAggregator(
        review_repo=DjangoReviewRepository(),
        company_repo=DjangoCompanyRepository(),
        clock=lambda: FIXED_NOW,
    )


@pytest.mark.django_db
class TestRatingAggregator:
    def test_recompute_counts_only_approved(self, make_user, make_company, make_review):
        company = make_company()
        for rating in (5, 4, 4):
            make_review(company=company, author=make_user(), rating=rating)
        make_review(company=company, author=make_user(), rating=1, status="pending")
        make_review(company=company, author=make_user(), rating=1, status="rejected")

        aggregate = _aggregator().recompute(company_id=company.id)

        assert aggregate.count == 3
        assert aggregate.average == pytest.approx(13 / 3, abs=1e-9)
        assert aggregate.distribution == {"1": 0, "2": 0, "3": 0, "4": 2, "5": 1}

    def test_recompute_is_read_only(self, make_user, make_company, make_review):
        company = make_company()
        make_review(company=company, author=make_user(), rating=5)

        _aggregator().recompute(company_id=company.id)

        assert Company.objects.get(pk=company.id).rating_count == 0

    def test_refresh_persists_cache(self, make_user, make_company, make_review):
        company = make_company()
        make_review(company=company, author=make_user(), rating=2)
        make_review(company=company, author=make_user(), rating=3)

        aggregate = _aggregator().refresh(company_id=company.id)

        company = assert_rating_cache_consistent(company.id)
        assert company.rating_average == aggregate.average == 2.5
        assert company.rating_updated_at == FIXED_NOW

    def test_refresh_of_empty_company_resets_cache(self, make_company):
        company = make_company(
            rating_average=4.2,
            rating_count=9,
            rating_distribution={"1": 0, "2": 0, "3": 0, "4": 9, "5": 0},
        )

        _aggregator().refresh(company_id=company.id)

        company = assert_rating_cache_consistent(company.id)
        assert company.rating_average == 0.0

    def test_refresh_fails_loud_for_missing_company(self):
        with pytest.raises(CompanyRatingWriteError):
            _aggregator().refresh(company_id=31337)

    def test_service_refresh_repairs_stale_cache(
        self, make_user, make_company, make_review
    ):
        company = make_company()
        make_review(company=company, author=make_user(), rating=5)

        aggregate = ReviewService.refresh_rating(company_id=company.id)

        assert aggregate.count == 1
        assert_rating_cache_consistent(company.id)
        assert ReviewService.get_rating(company_id=company.id) == aggregate

    def test_deleting_approved_review_refreshes_cache(
        self, make_user, make_company, review_payload
    ):
        company = make_company()
        author = make_user(verified=True)
        ReviewService.submit_review(
            company_id=company.id, author_id=author.id, payload=review_payload
        )

        author.delete()

        company = assert_rating_cache_consistent(company.id)
        assert company.rating_count == 0
