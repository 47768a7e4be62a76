from company.models import Company
from review.models import Review


def assert_rating_cache_consistent(company_id: int) -> Company:
    """Company 평점 캐시 == 승인된 리뷰 전체 재집계."""
    company = Company.objects.get(pk=company_id)
    ratings = list(
        Review.objects.filter(company_id=company_id, status="approved").values_list(
            "rating", flat=True
        )
    )
    expected_average = sum(ratings) / len(ratings) if ratings else 0.0

    assert company.rating_count == len(ratings)
    assert abs(company.rating_average - expected_average) <= 1e-9
    assert company.rating_distribution == {
        str(star): ratings.count(star) for star in range(1, 6)
    }
    return company
