# backend/newsrag/core/urls.py

"""
Core application URLs
"""
from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("", views.api_root, name="api_root"),
    path("health/", views.health, name="health"),
    path("health/store", views.store_health_check, name="store_health"),
]
