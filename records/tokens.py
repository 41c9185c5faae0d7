"""
Bearer token helpers.

Kept free of model imports so the authentication class can be loaded
while DRF reads its settings.
"""
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken


def issue_token(account) -> str:
    """Sign an access token carrying the account's identifier and role."""
    token = AccessToken.for_user(account)
    token['role'] = account.role
    return str(token)


def verify_token(raw_token) -> AccessToken:
    """Check signature and expiry of a bearer token.

    Raises ``AuthenticationFailed`` (401) for anything that does not
    validate, including tokens of another type.
    """
    try:
        return AccessToken(raw_token)
    except TokenError as exc:
        raise AuthenticationFailed('Invalid or expired token', code='token_not_valid') from exc


def token_claims(token: AccessToken) -> dict:
    return {'identifier': token[api_settings.USER_ID_CLAIM], 'role': token.get('role')}
