import pytest
from django.urls import reverse
from review.models import Review
from review.tests.helpers import assert_rating_cache_consistent


@pytest.mark.django_db
class TestReviewAdminActions:
    def test_approve_action_refreshes_company_rating(
        self, admin_client, make_user, make_company, make_review
    ):
        # Given
        company = make_company()
        pending = make_review(
            company=company, author=make_user(), rating=2, status="pending"
        )

        # When
        response = admin_client.post(
            reverse("admin:review_review_changelist"),
            {"action": "approve_reviews", "_selected_action": [pending.id]},
            follow=True,
        )

        # Then
        assert response.status_code == 200
        assert Review.objects.get(pk=pending.id).status == "approved"
        company = assert_rating_cache_consistent(company.id)
        assert company.rating_count == 1

    def test_reject_action_skips_non_pending(
        self, admin_client, make_user, make_company, make_review
    ):
        company = make_company()
        pending = make_review(company=company, author=make_user(), status="pending")
        approved = make_review(company=company, author=make_user(), status="approved")

        response = admin_client.post(
            reverse("admin:review_review_changelist"),
            {
                "action": "reject_reviews",
                "_selected_action": [pending.id, approved.id],
            },
            follow=True,
        )

        assert response.status_code == 200
        assert Review.objects.get(pk=pending.id).status == "rejected"
        assert Review.objects.get(pk=approved.id).status == "approved"
        assert any(
            str(approved.id) in str(m) for m in response.context["messages"]
        )

    def test_company_refresh_action(
        self, admin_client, make_user, make_company, make_review
    ):
        company = make_company()
        make_review(company=company, author=make_user(), rating=3)

        admin_client.post(
            reverse("admin:company_company_changelist"),
            {"action": "refresh_rating_cache", "_selected_action": [company.id]},
            follow=True,
        )

        company = assert_rating_cache_consistent(company.id)
        assert company.rating_count == 1
