"""
Views for accounts app.

Includes:
- Signup
- Login (issues bearer token)
- Current user
- User list
"""

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from .decorators import json_body, token_required
from .services import (
    DuplicateEmail, InvalidCredentials, login_user, register_user, serialize_user
)


@csrf_exempt
@require_POST
@json_body
def signup_view(request):
    data = request.json
    try:
        user = register_user(
            name=data.get('name'),
            email=data.get('email'),
            password=data.get('password'),
        )
    except ValidationError as e:
        return JsonResponse({'error': e.messages[0]}, status=400)
    except DuplicateEmail:
        return JsonResponse({'message': 'Email already exists'}, status=409)

    return JsonResponse(
        {'message': 'User created successfully', 'user': serialize_user(user)},
        status=201
    )


@csrf_exempt
@require_POST
@json_body
def login_view(request):
    data = request.json
    try:
        token = login_user(data.get('email'), data.get('password'), request=request)
    except InvalidCredentials:
        return JsonResponse({'error': 'Invalid Credentials'}, status=404)

    return JsonResponse({'message': 'Login Success', 'token': token})


@require_GET
@token_required
def me_view(request):
    return JsonResponse(serialize_user(request.user))


@require_GET
@token_required
def user_list_view(request):
    """List all active users (owners for task assignment)."""
    users = get_user_model().objects.filter(is_active=True).order_by('name', 'pk')
    return JsonResponse({'users': [serialize_user(user) for user in users]})
