# utils/views.py
import logging

from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def health(request):
    try:
        connection.ensure_connection()
        database = 'connected'
    except DatabaseError as e:
        logger.error(f"Health check could not reach the database: {e}")
        database = 'disconnected'

    return Response({
        'status': 'ok',
        'service': 'inventory-tracker-api',
        'timestamp': timezone.now().isoformat(),
        'database': database,
    })
