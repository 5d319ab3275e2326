"""
Service layer for accounts app.

Services:
- register_user: Create a user from signup data
- login_user: Check credentials and issue a bearer token
- serialize_user: Plain dict for JSON responses
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.core.exceptions import ValidationError
from django.db import transaction

from .tokens import issue_token

logger = logging.getLogger(__name__)


class DuplicateEmail(Exception):
    """Raised when signing up with an email that is already registered."""


class InvalidCredentials(Exception):
    """Raised when login email/password do not match an active user."""


def register_user(name, email, password):
    """
    Create a new user.

    Args:
        name: Display name (required)
        email: Unique email address (required)
        password: Raw password, hashed with the configured hashers

    Returns:
        Created User instance

    Raises:
        ValidationError: If a required field is missing
        DuplicateEmail: If the email is already registered
    """
    User = get_user_model()

    for label, value in (('Name', name), ('Email', email), ('Password', password)):
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{label} must be a string.")

    if not name or not name.strip():
        raise ValidationError("Name is required.")
    if not email or not email.strip():
        raise ValidationError("Email is required.")
    if not password:
        raise ValidationError("Password is required.")

    email = User.objects.normalize_email(email.strip())

    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmail(email)

    with transaction.atomic():
        user = User.objects.create_user(
            email=email,
            password=password,
            name=name.strip(),
        )

    logger.info(f'User created: {user.email}')
    return user


def login_user(email, password, request=None):
    """
    Authenticate by email/password and return a fresh token.

    Raises:
        InvalidCredentials: If the email is unknown or the password is wrong
    """
    user = authenticate(request, email=email, password=password)
    if user is None:
        logger.warning(f'Failed login for {email}')
        raise InvalidCredentials(email)
    return issue_token(user)


def serialize_user(user):
    return {
        'id': user.pk,
        'name': user.name,
        'email': user.email,
    }
