"""
Liveness check: ``/healthz`` answers 200 while the store accepts a query.
"""
import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def healthz(request):
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            (value,) = cursor.fetchone()
    except DatabaseError as exc:
        logger.error('health check failed: %s', exc)
        return JsonResponse({'ok': False, 'db': False, 'error': str(exc)}, status=500)
    return JsonResponse({'ok': True, 'db': value == 1})
