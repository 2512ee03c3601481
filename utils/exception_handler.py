# utils/exception_handler.py
import logging

from django.db import InterfaceError, OperationalError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import ServiceUnavailable

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """Wrap every API error as {success: false, message, [errors]}."""
    if isinstance(exc, (OperationalError, InterfaceError)):
        logger.error(f"Store unavailable: {exc}")
        exc = ServiceUnavailable()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}")
        return Response(
            {'success': False, 'message': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        errors = response.data
        if isinstance(errors, list):
            errors = {'non_field_errors': errors}
        response.data = {
            'success': False,
            'message': 'Validation failed',
            'errors': errors,
        }
    else:
        response.data = {
            'success': False,
            'message': str(getattr(exc, 'detail', exc)),
        }
    return response
