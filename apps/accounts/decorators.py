"""
Request decorators for token-authenticated JSON views.
"""

import json
import logging
from functools import wraps

from django.contrib.auth import get_user_model
from django.core import signing
from django.http import JsonResponse

from .tokens import read_token

logger = logging.getLogger(__name__)


def token_required(view_func):
    """
    Require a valid bearer token in the Authorization header.

    Responds 401 when the token is missing, invalid, expired, or names a
    user that no longer exists. On success the user is set on
    ``request.user``.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        token = request.headers.get('Authorization')
        if not token:
            return JsonResponse({'message': 'No Token provided'}, status=401)

        try:
            payload = read_token(token)
        except signing.BadSignature:
            logger.warning(f'Rejected invalid token for {request.path}')
            return JsonResponse({'message': 'Invalid Token'}, status=401)

        User = get_user_model()
        try:
            user = User.objects.get(email=payload.get('email'), is_active=True)
        except User.DoesNotExist:
            logger.warning(f'Token for unknown user {payload.get("email")}')
            return JsonResponse({'message': 'Invalid Token'}, status=401)

        request.user = user
        return view_func(request, *args, **kwargs)

    return wrapper


def json_body(view_func):
    """
    Parse a JSON request body into ``request.json``.

    GET/DELETE requests and empty bodies get an empty dict. Malformed JSON,
    or a body that is not an object, responds 400.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        request.json = {}
        if request.body:
            try:
                data = json.loads(request.body)
            except ValueError:
                return JsonResponse({'error': 'Malformed JSON body'}, status=400)
            if not isinstance(data, dict):
                return JsonResponse({'error': 'JSON body must be an object'}, status=400)
            request.json = data
        return view_func(request, *args, **kwargs)

    return wrapper
