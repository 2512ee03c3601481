# utils/exceptions.py
from rest_framework import status
from rest_framework.exceptions import APIException


class InvalidArgument(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid request argument.'
    default_code = 'invalid_argument'


class ConflictError(APIException):
    """Raised when a write collides with a uniqueness constraint."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The record conflicts with an existing one.'
    default_code = 'conflict'


class ServiceUnavailable(APIException):
    """The store could not be reached. Safe for the caller to retry later."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'Service temporarily unavailable, try again later.'
    default_code = 'service_unavailable'
