# backend/newsrag/core/views.py
"""
Core application views including health checks
"""
import logging

from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from newsrag.domain.models import DomainException
from newsrag.infrastructure.container import get_services
from newsrag.infrastructure.health import check_store_health

logger = logging.getLogger(__name__)


@extend_schema(tags=["Health"], summary="Liveness check", responses={200: OpenApiTypes.OBJECT})
@api_view(["GET"])
@permission_classes([AllowAny])
def health(request):
    """Process is up"""
    return Response({"status": "ok"})


@extend_schema(
    tags=["Health"],
    summary="Key-value store health check",
    description="Write and read back a probe value and measure latency.",
    responses={
        200: OpenApiTypes.OBJECT,
        503: OpenApiTypes.OBJECT,
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
@never_cache
def store_health_check(request):
    """
    Store health check endpoint for load balancers and monitoring.

    Returns:
        200: Store is healthy
        503: Store is unreachable

    Response format:
        {"status": "healthy", "latency_ms": 1.2}
        {"status": "unhealthy", "error": "connection refused", "latency_ms": 5.0}
    """
    try:
        store = get_services().store
    except DomainException as e:
        logger.error(f"Store health check could not build services: {e}")
        return JsonResponse(
            {"status": "unhealthy", "error": str(e), "latency_ms": 0.0}, status=503
        )

    result = check_store_health(store)
    status_code = 200 if result["status"] == "healthy" else 503
    return JsonResponse(result, status=status_code)


def api_root(request):
    """API root endpoint showing available endpoints"""
    return JsonResponse(
        {
            "message": "News RAG Chat API",
            "version": "1.0",
            "endpoints": {
                "health": "/api/health/",
                "store_health": "/api/health/store",
                "sessions": "/api/sessions/",
                "history": "/api/sessions/{id}/history/",
                "chat": "/api/sessions/{id}/chat/",
                "ingest": "/api/ingest/",
                "keys": "/api/keys/",
                "schema": "/api/schema/",
            },
        }
    )
