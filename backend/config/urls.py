# backend/config/urls.py
"""
URL configuration for the news RAG chat backend.
"""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path("api/", include("newsrag.core.urls")),
    path("api/", include("newsrag.chat.urls")),
    path("api/", include("newsrag.rag.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
]
