"""
API error types raised by services, permissions and views.

Only ``rest_framework.exceptions`` is imported here: permission classes
load while DRF builds ``rest_framework.views``, so nothing on that path
may import the views module.
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class InvalidCredentials(APIException):
    # Not an AuthenticationFailed: DRF would rewrite that to 403 on views
    # without an authenticate header.
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Incorrect password'
    default_code = 'unauthorized'


class TokenRequired(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Token is required'
    default_code = 'forbidden'


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Record already exists'
    default_code = 'conflict'


class StoreError(APIException):
    """The relational store rejected or failed a statement."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Database error occurred'
    default_code = 'server_error'
