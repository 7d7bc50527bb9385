# backend/newsrag/rag/urls.py

"""
Ingestion URLs
"""
from django.urls import path

from . import views

app_name = "rag"

urlpatterns = [
    path("ingest/", views.ingest, name="ingest"),
]
