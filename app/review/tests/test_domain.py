from datetime import datetime, timezone

import pytest
from pydantic import ValidationError
from review.domain.rating import RatingAggregate, aggregate_from_counts
from review.domain.redaction import project_author, to_list_item
from review.domain.review import ANONYMOUS_NAME, ReviewRecord
from review.domain.sorting import DEFAULT_SORT, ReviewSort, parse_sort
from review.domain.status import (
    ReviewStatus,
    affects_rating,
    can_transition,
    initial_status,
)
from review.dtos import ReviewSubmission, validation_error_details
from user.domain.reviewer import AuthorProfile


def _record(**overrides) -> ReviewRecord:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    values = dict(
        id=1,
        company_id=10,
        author_id=7,
        rating=4,
        title="Good place",
        content="Solid engineering culture.",
        pros="",
        cons="",
        is_anonymous=False,
        is_verified=True,
        status=ReviewStatus.APPROVED,
        report_count=0,
        created_at=now,
        updated_at=now,
        helpful_count=2,
    )
    values.update(overrides)
    return ReviewRecord(**values)


class TestRatingAggregate:
    def test_empty_set_is_zero(self):
        aggregate = aggregate_from_counts({})

        assert aggregate == RatingAggregate()
        assert aggregate.average == 0.0
        assert aggregate.count == 0
        assert aggregate.distribution == {"1": 0, "2": 0, "3": 0, "4": 0, "5": 0}

    def test_mean_is_not_rounded(self):
        # 5, 4, 4 → 13/3
        aggregate = aggregate_from_counts({5: 1, 4: 2})

        assert aggregate.count == 3
        assert aggregate.average == pytest.approx(13 / 3, abs=1e-9)
        assert aggregate.average != round(aggregate.average, 1)
        assert aggregate.distribution == {"1": 0, "2": 0, "3": 0, "4": 2, "5": 1}

    def test_zero_counts_are_ignored(self):
        aggregate = aggregate_from_counts({1: 0, 3: 2})

        assert aggregate.count == 2
        assert aggregate.average == 3.0

    def test_out_of_range_rating_is_an_error(self):
        with pytest.raises(ValueError):
            aggregate_from_counts({6: 1})

    def test_as_dict(self):
        assert aggregate_from_counts({5: 1}).as_dict() == {
            "average": 5.0,
            "count": 1,
            "distribution": {"1": 0, "2": 0, "3": 0, "4": 0, "5": 1},
        }


class TestReviewStatus:
    @pytest.mark.parametrize(
        "current,target,allowed",
        [
            (ReviewStatus.PENDING, ReviewStatus.APPROVED, True),
            (ReviewStatus.PENDING, ReviewStatus.REJECTED, True),
            (ReviewStatus.APPROVED, ReviewStatus.REJECTED, True),
            (ReviewStatus.APPROVED, ReviewStatus.PENDING, False),
            (ReviewStatus.REJECTED, ReviewStatus.APPROVED, False),
            (ReviewStatus.REJECTED, ReviewStatus.PENDING, False),
            (ReviewStatus.REJECTED, ReviewStatus.REJECTED, False),
        ],
    )
    def test_transition_table(self, current, target, allowed):
        assert can_transition(current, target) is allowed

    def test_accepts_raw_strings(self):
        assert can_transition("pending", "approved") is True

    def test_initial_status_follows_verification(self):
        assert initial_status(author_verified=True) is ReviewStatus.APPROVED
        assert initial_status(author_verified=False) is ReviewStatus.PENDING

    def test_affects_rating_only_when_approved_membership_changes(self):
        assert affects_rating(ReviewStatus.PENDING, ReviewStatus.APPROVED)
        assert affects_rating(ReviewStatus.APPROVED, ReviewStatus.REJECTED)
        assert not affects_rating(ReviewStatus.PENDING, ReviewStatus.REJECTED)


class TestSortParsing:
    def test_default_is_newest(self):
        assert parse_sort(None) is DEFAULT_SORT is ReviewSort.NEWEST
        assert parse_sort("") is ReviewSort.NEWEST

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("most-helpful", ReviewSort.MOST_HELPFUL),
            ("highest-rating", ReviewSort.HIGHEST_RATING),
            ("lowest-rating", ReviewSort.LOWEST_RATING),
            ("-createdAt", ReviewSort.NEWEST),
            ("-helpfulCount", ReviewSort.MOST_HELPFUL),
            ("-rating", ReviewSort.HIGHEST_RATING),
            ("rating", ReviewSort.LOWEST_RATING),
        ],
    )
    def test_known_values_and_aliases(self, raw, expected):
        assert parse_sort(raw) is expected

    def test_unknown_value(self):
        assert parse_sort("random") is None


class TestAuthorRedaction:
    def test_anonymous_review_hides_author(self):
        record = _record(is_anonymous=True)
        profiles = {7: AuthorProfile(user_id=7, name="Kim", avatar="a.png", title="PM")}

        author = project_author(record, profiles)

        assert author.id is None
        assert author.name == ANONYMOUS_NAME == "Anonymous User"
        assert author.avatar is None
        assert author.title is None
        # 저장된 작성자 참조는 그대로
        assert record.author_id == 7

    def test_named_review_shows_profile(self):
        record = _record()
        profiles = {7: AuthorProfile(user_id=7, name="Kim", avatar="a.png", title="PM")}

        item = to_list_item(record, profiles=profiles, is_helpful=True)

        assert item.author.id == 7
        assert item.author.name == "Kim"
        assert item.author.avatar == "a.png"
        assert item.author.title == "PM"
        assert item.is_helpful is True
        assert item.helpful_count == 2

    def test_missing_profile_does_not_break(self):
        author = project_author(_record(), {})

        assert author.id == 7
        assert author.name == ""


class TestReviewSubmission:
    def test_strips_and_defaults(self):
        submission = ReviewSubmission.model_validate(
            {"rating": 3, "title": "  Okay  ", "content": "Decent place to work."}
        )

        assert submission.title == "Okay"
        assert submission.pros is None
        assert submission.is_anonymous is False

    def test_accepts_camel_case_anonymous_flag(self):
        submission = ReviewSubmission.model_validate(
            {
                "rating": 3,
                "title": "Okay",
                "content": "Decent place to work.",
                "isAnonymous": True,
            }
        )

        assert submission.is_anonymous is True

    def test_field_errors_are_collected(self):
        with pytest.raises(ValidationError) as exc_info:
            ReviewSubmission.model_validate(
                {"rating": 6, "title": "ab", "content": "short", "pros": "x" * 501}
            )

        details = validation_error_details(exc_info.value)
        assert set(details) == {"rating", "title", "content", "pros"}
        assert all(isinstance(msgs, list) and msgs for msgs in details.values())
