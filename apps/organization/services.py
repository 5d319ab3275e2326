"""
Service layer for organization app.

Services:
- create_entity: Create a Team, Project or Tag with a unique name
- serialize_entity: Plain dict for JSON responses
"""

import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

logger = logging.getLogger(__name__)


class DuplicateName(Exception):
    """Raised when creating an entity whose name is already taken."""

    def __init__(self, model, name):
        self.model = model
        self.name = name
        super().__init__(f'{model._meta.verbose_name.title()} "{name}" already exists')


def create_entity(model, name, description=None):
    """
    Create a named organization entity.

    Args:
        model: Team, Project or Tag
        name: Unique name (required, stored exactly as given after trimming)
        description: Optional description (ignored for models without one)

    Returns:
        Created instance

    Raises:
        ValidationError: If the name is missing
        DuplicateName: If an entity with that name already exists
    """
    if not name or not str(name).strip():
        raise ValidationError(f"{model._meta.verbose_name.title()} name is required.")

    if description is not None and not isinstance(description, str):
        raise ValidationError(f"{model._meta.verbose_name.title()} description must be a string.")

    name = str(name).strip()
    fields = {'name': name}
    if description and any(f.name == 'description' for f in model._meta.get_fields()):
        fields['description'] = description.strip()

    if model.objects.filter(name=name).exists():
        raise DuplicateName(model, name)

    try:
        with transaction.atomic():
            instance = model.objects.create(**fields)
    except IntegrityError:
        # Lost a race with a concurrent create of the same name
        raise DuplicateName(model, name)

    logger.info(f'{model._meta.verbose_name.title()} created: {instance.name}')
    return instance


def serialize_entity(instance):
    data = {'id': instance.pk, 'name': instance.name}
    if hasattr(instance, 'description'):
        data['description'] = instance.description
    return data
