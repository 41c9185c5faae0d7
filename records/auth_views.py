"""
Authentication views.

``/login`` and ``/register`` are open (throttled per client); ``/auth/verify``
echoes the claims of the presented bearer token so the client can check a
stored session without touching the credential store.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from .permissions import HasBearerToken
from .serializers.auth import LoginSerializer, RegisterSerializer
from .services import accounts
from .tokens import token_claims


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([ScopedRateThrottle])
def login_view(request):
    """
    Exchange identifier, password and the role picked on the login form
    for a bearer token.  Accepts ``mcr_number`` or ``identifier`` and
    ``selectedRole`` or ``role``.
    """
    s = LoginSerializer(data=request.data)
    if not s.is_valid():
        if s.only_missing_fields():
            raise ValidationError('MCR Number, password, and role are required')
        raise ValidationError(s.errors)
    vd = s.validated_data
    token, role = accounts.authenticate(vd['mcr_number'], vd['password'], vd['selectedRole'])
    return Response({
        'ok': True,
        'message': 'Authentication successful',
        'token': token,
        'role': role,
    })


# @api_view has no hook for the throttle scope
login_view.cls.throttle_scope = 'login'


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([ScopedRateThrottle])
def register_view(request):
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    accounts.register(identifier=vd['mcr_number'], email=vd['email'], password=vd['password'], role=vd['role'])
    return Response({'ok': True, 'message': 'User has been created'}, status=status.HTTP_201_CREATED)


register_view.cls.throttle_scope = 'register'


@api_view(['GET'])
@permission_classes([HasBearerToken])
def verify_view(request):
    claims = token_claims(request.auth)
    return Response({'ok': True, **claims})
