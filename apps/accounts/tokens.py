"""
Bearer tokens for the JSON API.

Tokens are timestamp-signed payloads produced with ``django.core.signing``
and expire after ``AUTH_TOKEN_MAX_AGE`` seconds.
"""

from django.conf import settings
from django.core import signing

BEARER_PREFIX = 'Bearer '


def issue_token(user):
    """Return a signed token carrying the user's name and email."""
    payload = {'name': user.name, 'email': user.email}
    return signing.dumps(payload, salt=settings.AUTH_TOKEN_SALT)


def read_token(token):
    """
    Verify a token and return its payload.

    Raises:
        signing.SignatureExpired: If the token is older than AUTH_TOKEN_MAX_AGE
        signing.BadSignature: If the token was tampered with
    """
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]
    return signing.loads(
        token,
        salt=settings.AUTH_TOKEN_SALT,
        max_age=settings.AUTH_TOKEN_MAX_AGE,
    )
