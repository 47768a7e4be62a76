# app/conftest.py
"""
pytest fixtures for company review tests
"""
import itertools

import pytest
from company.models import Company
from review.models import Review
from user.models import User

_seq = itertools.count(1)


@pytest.fixture
def make_user(db):
    """
    테스트용 사용자를 생성합니다.
    """

    def _make_user(*, verified: bool = False, **kwargs) -> User:
        n = next(_seq)
        defaults = {
            "username": f"user{n}",
            "email": f"user{n}@example.com",
            "display_name": f"User {n}",
            "headline": "Backend Engineer",
            "avatar_url": f"https://cdn.example.com/avatars/{n}.png",
        }
        defaults.update(kwargs)
        return User.objects.create_user(is_verified=verified, **defaults)

    return _make_user


@pytest.fixture
def make_company(db):
    """
    테스트용 회사를 생성합니다.
    """

    def _make_company(**kwargs) -> Company:
        n = next(_seq)
        defaults = {"name": f"Company {n}", "slug": f"company-{n}"}
        defaults.update(kwargs)
        return Company.objects.create(**defaults)

    return _make_company


@pytest.fixture
def make_review(db):
    """
    저장소를 직접 통해 리뷰를 만듭니다 (평점 캐시는 갱신하지 않음).
    """

    def _make_review(
        *, company, author, rating: int = 4, status: str = "approved", **kwargs
    ) -> Review:
        defaults = {
            "title": "Good place",
            "content": "Solid engineering culture overall.",
        }
        defaults.update(kwargs)
        return Review.objects.create(
            company=company, author=author, rating=rating, status=status, **defaults
        )

    return _make_review


@pytest.fixture
def review_payload():
    return {
        "rating": 5,
        "title": "Great",
        "content": "Great team and good work-life balance.",
        "pros": "Flexible hours",
        "cons": "Slow promotions",
    }
