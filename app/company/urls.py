from company.views import CompanyDetailView
from django.urls import path

urlpatterns = [
    path("<int:company_id>/", CompanyDetailView.as_view(), name="company-detail"),
]
