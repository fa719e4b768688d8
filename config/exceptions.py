"""
REST framework exception handler.

Storage failures are reported to clients as a generic, retryable error.
Everything else falls through to DRF's default handling.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

PERSISTENCE_ERROR_MESSAGE = 'Could not save your data. Please try again.'


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.exception(
            "Persistence error in %s",
            view.__class__.__name__ if view else 'unknown view'
        )
        return Response(
            {'error': PERSISTENCE_ERROR_MESSAGE},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    return None
