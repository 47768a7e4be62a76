from django.urls import path
from review.views import CompanyReviewListCreateView, ReviewVoteView

urlpatterns = [
    path(
        "companies/<int:company_id>/reviews/",
        CompanyReviewListCreateView.as_view(),
        name="company-reviews",
    ),
    path(
        "reviews/<int:review_id>/vote/",
        ReviewVoteView.as_view(),
        name="review-vote",
    ),
]
