# backend/newsrag/core/utils.py
"""
Utility functions for the core app
"""
import logging

from rest_framework import status
from rest_framework.response import Response

from newsrag.domain.models import DomainException, InvalidRequest

logger = logging.getLogger(__name__)


def error_response(exc: Exception, message: str) -> Response:
    """
    Translate a domain failure into a generic JSON error response

    Args:
        exc: The raised exception
        message: Short user-facing message for the failed operation

    Returns:
        400 for InvalidRequest, 500 for every other failure
    """
    if isinstance(exc, InvalidRequest):
        return Response(
            {"error": message, "detail": str(exc)},
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, DomainException):
        logger.error(f"{message}: {type(exc).__name__}: {exc}")
    else:
        logger.error(f"{message}: {exc}", exc_info=True)

    return Response(
        {"error": message, "detail": str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
