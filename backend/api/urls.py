"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import CoordinateSummaryView

urlpatterns = [
    path("", CoordinateSummaryView.as_view(), name="summary"),
]
