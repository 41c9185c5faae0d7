"""
Unified exception handler.

Every failure leaves a view as ``{"ok": false, "error": {"code", "message"}}``
with the HTTP status of the error class.  The error types themselves live
in :mod:`records.errors`.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response

from .errors import StoreError

logger = logging.getLogger(__name__)

ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: 'bad_request',
    status.HTTP_401_UNAUTHORIZED: 'unauthorized',
    status.HTTP_403_FORBIDDEN: 'forbidden',
    status.HTTP_404_NOT_FOUND: 'not_found',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'method_not_allowed',
    status.HTTP_409_CONFLICT: 'conflict',
    status.HTTP_429_TOO_MANY_REQUESTS: 'throttled',
}


def api_exception_handler(exc, context):
    # rest_framework.views reads the permission settings on import,
    # which lead back into this app.
    from rest_framework.views import exception_handler as drf_exception_handler

    view = context.get('view')
    if isinstance(exc, DatabaseError):
        logger.error('store error in %s', type(view).__name__, exc_info=exc)
        exc = StoreError()
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error('unhandled error in %s', type(view).__name__, exc_info=exc)
        return Response(
            {'ok': False, 'error': {'code': 'server_error', 'message': 'Internal server error'}},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    if isinstance(resp.data, dict) and set(resp.data) == {'detail'}:
        detail = resp.data['detail']
    else:
        detail = resp.data
    if isinstance(detail, list) and len(detail) == 1:
        detail = detail[0]
    code = ERROR_CODES.get(resp.status_code, 'server_error' if resp.status_code >= 500 else 'api_error')
    resp.data = {'ok': False, 'error': {'code': code, 'message': detail}}
    return resp
