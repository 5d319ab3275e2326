"""
Views for organization app.

Each entity (team, project, tag) gets a list/create endpoint.
"""

from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.accounts.decorators import json_body, token_required
from .models import Project, Tag, Team
from .services import DuplicateName, create_entity, serialize_entity


def _list_or_create(request, model, collection):
    if request.method == 'GET':
        items = model.objects.order_by('name')
        return JsonResponse({collection: [serialize_entity(item) for item in items]})

    try:
        instance = create_entity(
            model,
            request.json.get('name'),
            description=request.json.get('description'),
        )
    except ValidationError as e:
        return JsonResponse({'error': e.messages[0]}, status=400)
    except DuplicateName as e:
        return JsonResponse({'error': str(e)}, status=409)

    return JsonResponse(serialize_entity(instance), status=201)


@csrf_exempt
@require_http_methods(['GET', 'POST'])
@token_required
@json_body
def team_collection_view(request):
    return _list_or_create(request, Team, 'teams')


@csrf_exempt
@require_http_methods(['GET', 'POST'])
@token_required
@json_body
def project_collection_view(request):
    return _list_or_create(request, Project, 'projects')


@csrf_exempt
@require_http_methods(['GET', 'POST'])
@token_required
@json_body
def tag_collection_view(request):
    return _list_or_create(request, Tag, 'tags')
