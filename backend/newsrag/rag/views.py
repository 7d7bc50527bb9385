# backend/newsrag/rag/views.py
"""
Ingestion API views
"""
import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from newsrag.core.utils import error_response
from newsrag.domain.models import DomainException
from newsrag.infrastructure.container import get_services

logger = logging.getLogger(__name__)


@extend_schema(
    tags=["Ingest"],
    summary="Ingest RSS feeds",
    description="Fetch feed articles, recreate the collection, embed and index them.",
    request=None,
    responses={200: OpenApiTypes.OBJECT, 500: OpenApiTypes.OBJECT},
)
@api_view(["POST"])
@permission_classes([AllowAny])
def ingest(request):
    """Run one ingestion pass (call manually or from cron)"""
    services = get_services()
    limit = services.config["ingest"]["limit"]

    try:
        count = services.ingest_service.ingest(limit=limit)
    except DomainException as e:
        return error_response(e, "failed to ingest")

    return Response({"status": "ok", "ingested": count})
