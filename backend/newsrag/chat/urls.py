# backend/newsrag/chat/urls.py

"""
Session and chat URLs
"""
from django.urls import path

from . import views

app_name = "chat"

urlpatterns = [
    path("sessions/", views.create_session, name="session-create"),
    path("sessions/<str:session_id>/", views.clear_session, name="session-clear"),
    path("sessions/<str:session_id>/history/", views.session_history, name="session-history"),
    path("sessions/<str:session_id>/chat/", views.chat, name="chat"),
    path("keys/", views.session_keys, name="session-keys"),
]
