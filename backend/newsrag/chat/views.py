# backend/newsrag/chat/views.py
"""
Session and chat API views
"""
import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from newsrag.core.utils import error_response
from newsrag.domain.models import DomainException
from newsrag.infrastructure.container import get_services

from .serializers import ChatRequestSerializer, ChatResponseSerializer, HistorySerializer

logger = logging.getLogger(__name__)


def _chat_service():
    return get_services().chat_service


@extend_schema(tags=["Sessions"], summary="Create session", request=None, responses={201: OpenApiTypes.OBJECT})
@api_view(["POST"])
@permission_classes([AllowAny])
def create_session(request):
    """Create a session with empty history"""
    try:
        session_id = _chat_service().create_session()
    except DomainException as e:
        return error_response(e, "failed to create session")

    return Response({"sessionId": session_id}, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Sessions"], summary="Get session history", responses={200: HistorySerializer, 404: OpenApiTypes.OBJECT})
@api_view(["GET"])
@permission_classes([AllowAny])
def session_history(request, session_id):
    """Return the stored history, or 404 if the session does not exist"""
    try:
        history = _chat_service().get_history(session_id)
    except DomainException as e:
        return error_response(e, "failed to load session")

    if history is None:
        return Response({"error": "session not found"}, status=status.HTTP_404_NOT_FOUND)

    return Response(HistorySerializer({"sessionId": session_id, "history": history}).data)


@extend_schema(tags=["Sessions"], summary="Clear session", responses={200: HistorySerializer})
@api_view(["DELETE"])
@permission_classes([AllowAny])
def clear_session(request, session_id):
    """Reset history to empty; the session id stays valid"""
    try:
        cleared = _chat_service().clear_session(session_id)
    except DomainException as e:
        return error_response(e, "failed to clear session")

    return Response({"sessionId": session_id, "history": cleared})


@extend_schema(
    tags=["Chat"],
    summary="Chat turn",
    request=ChatRequestSerializer,
    responses={200: ChatResponseSerializer, 400: OpenApiTypes.OBJECT, 500: OpenApiTypes.OBJECT},
)
@api_view(["POST"])
@permission_classes([AllowAny])
def chat(request, session_id):
    """
    Answer a query within a session and append the turn to its history

    Nothing is written to the session when retrieval or generation fails.
    """
    serializer = ChatRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {"error": "query missing", "detail": serializer.errors},
            status=status.HTTP_400_BAD_REQUEST,
        )

    data = serializer.validated_data

    try:
        result = _chat_service().handle_chat_turn(
            session_id=session_id, query=data["query"], k=data.get("topK")
        )
    except DomainException as e:
        return error_response(e, "chat failed")

    return Response(
        ChatResponseSerializer(
            {
                "sessionId": session_id,
                "query": data["query"],
                "answer": result.answer,
                "history": result.history,
            }
        ).data
    )


@extend_schema(tags=["Sessions"], summary="List live session keys", responses={200: OpenApiTypes.OBJECT})
@api_view(["GET"])
@permission_classes([AllowAny])
def session_keys(request):
    """Administrative listing of live non-cache keys"""
    try:
        keys = _chat_service().list_sessions()
    except DomainException as e:
        return error_response(e, "failed to list keys")

    return Response({"keys": keys})
