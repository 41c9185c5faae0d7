"""
Bearer token authentication.

Tokens are verified statelessly: the identifier and role are read from
the signed claims, the credential store is not queried again.  The
resulting ``request.user`` is a simplejwt ``TokenUser`` whose ``id``
is the MCR number and whose ``role`` comes from the token.
"""
from __future__ import annotations

from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication

from .tokens import verify_token


class BearerTokenAuthentication(JWTStatelessUserAuthentication):
    """``Authorization: Bearer <token>``; a bad token is a 401."""

    def get_validated_token(self, raw_token):
        return verify_token(raw_token)


def acting_identifier(request) -> str:
    """The MCR number of the user behind a verified request."""
    return str(request.user.id)
