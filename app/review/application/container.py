from __future__ import annotations

from common.adapters.django_unit_of_work import DjangoUnitOfWork
from company.adapters.django_company_repo import DjangoCompanyRepository
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from review.adapters.django_review_repo import DjangoReviewRepository
from review.application.rating_aggregator import RatingAggregator
from review.application.usecases.list_company_reviews import ListCompanyReviewsUseCase
from review.application.usecases.moderate_review import ModerateReviewUseCase
from review.application.usecases.report_review import ReportReviewUseCase
from review.application.usecases.submit_review import SubmitReviewUseCase
from review.application.usecases.toggle_helpful_vote import ToggleHelpfulVoteUseCase
from user.adapters.django_user_directory import DjangoUserDirectory


def _positive_setting(name: str, default: int) -> int:
    value = int(getattr(settings, name, default))
    if value < 1:
        raise ImproperlyConfigured(f"{name} must be a positive integer, got {value}")
    return value


def build_rating_aggregator() -> RatingAggregator:
    return RatingAggregator(
        review_repo=DjangoReviewRepository(),
        company_repo=DjangoCompanyRepository(),
    )


def build_submit_review_usecase() -> SubmitReviewUseCase:
    return SubmitReviewUseCase(
        review_repo=DjangoReviewRepository(),
        company_repo=DjangoCompanyRepository(),
        user_directory=DjangoUserDirectory(),
        rating_aggregator=build_rating_aggregator(),
        unit_of_work=DjangoUnitOfWork(),
    )


def build_list_company_reviews_usecase() -> ListCompanyReviewsUseCase:
    return ListCompanyReviewsUseCase(
        review_repo=DjangoReviewRepository(),
        company_repo=DjangoCompanyRepository(),
        user_directory=DjangoUserDirectory(),
        rating_aggregator=build_rating_aggregator(),
        default_page_size=_positive_setting("REVIEW_DEFAULT_PAGE_SIZE", 10),
        max_page_size=_positive_setting("REVIEW_MAX_PAGE_SIZE", 50),
    )


def build_toggle_helpful_vote_usecase() -> ToggleHelpfulVoteUseCase:
    return ToggleHelpfulVoteUseCase(
        review_repo=DjangoReviewRepository(),
        unit_of_work=DjangoUnitOfWork(),
    )


def build_report_review_usecase() -> ReportReviewUseCase:
    return ReportReviewUseCase(
        review_repo=DjangoReviewRepository(),
        rating_aggregator=build_rating_aggregator(),
        unit_of_work=DjangoUnitOfWork(),
        report_threshold=_positive_setting("REVIEW_REPORT_THRESHOLD", 5),
    )


def build_moderate_review_usecase() -> ModerateReviewUseCase:
    return ModerateReviewUseCase(
        review_repo=DjangoReviewRepository(),
        rating_aggregator=build_rating_aggregator(),
        unit_of_work=DjangoUnitOfWork(),
    )
