"""
Views for tasks app.

Includes:
- Task list filtered by team/owner/tags/project/status names
- Task create
- Task detail, update and delete
"""

from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.accounts.decorators import json_body, token_required
from .exceptions import TaskQueryError
from .filters import FilterBuilder, TaskCriteria
from .models import Task
from .responses import query_error_response
from .services import (
    TaskQueryService, create_task, delete_task, serialize_task, update_task
)
from .store import get_task_store


def _validation_error_response(error):
    return JsonResponse({'error': '; '.join(error.messages)}, status=400)


@csrf_exempt
@require_http_methods(['GET', 'POST'])
@token_required
@json_body
def task_collection_view(request):
    """
    GET: tasks matching ?team=&owner=&tags=&project=&status= (all if none).
    POST: create a task.
    """
    if request.method == 'POST':
        try:
            task = create_task(request.json)
        except ValidationError as e:
            return _validation_error_response(e)
        return JsonResponse(serialize_task(task), status=201)

    store = get_task_store()
    criteria = TaskCriteria.from_query_params(request.GET)
    try:
        predicate = FilterBuilder.for_store(store).build(criteria)
        tasks = TaskQueryService(store).query_tasks(predicate, allow_empty=False)
    except TaskQueryError as e:
        return query_error_response(e)

    return JsonResponse({'tasks': [serialize_task(task) for task in tasks]})


@csrf_exempt
@require_http_methods(['GET', 'POST', 'DELETE'])
@token_required
@json_body
def task_detail_view(request, pk):
    task = get_object_or_404(Task, pk=pk)

    if request.method == 'GET':
        return JsonResponse(serialize_task(task))

    if request.method == 'DELETE':
        delete_task(task)
        return JsonResponse({'message': 'Task deleted successfully', 'id': pk})

    try:
        task = update_task(task, request.json)
    except ValidationError as e:
        return _validation_error_response(e)
    return JsonResponse(serialize_task(task))
