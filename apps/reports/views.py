"""
Views for reports app.

- Completed in the last week (trailing window)
- Pending workload
- Completed tasks grouped by team, owner or project
"""

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from apps.accounts.decorators import token_required
from apps.tasks.exceptions import EmptyResult, InvalidArgument, TaskQueryError
from apps.tasks.responses import query_error_response
from apps.tasks.services import serialize_task
from apps.tasks.store import get_task_store
from .services import ReportEngine


def _window_days(request):
    raw = request.GET.get('days')
    if not raw:
        return settings.REPORT_WINDOW_DAYS
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument('days', raw, [])


@require_GET
@token_required
def completed_last_week_view(request):
    """Completed tasks updated within the trailing window (default 7 days)."""
    try:
        window_days = _window_days(request)
        tasks = ReportEngine(get_task_store()).completed_since(window_days)
        if not tasks:
            raise EmptyResult('No tasks completed in the given window')
    except TaskQueryError as e:
        return query_error_response(e)

    return JsonResponse({
        'windowDays': window_days,
        'tasks': [serialize_task(task) for task in tasks],
    })


@require_GET
@token_required
def pending_work_view(request):
    workload = ReportEngine(get_task_store()).pending_workload()
    return JsonResponse(workload.as_dict())


@require_GET
@token_required
def closed_tasks_view(request):
    """Completed tasks grouped by ?groupBy=team|owner|project."""
    try:
        report = ReportEngine(get_task_store()).grouped_completions(
            request.GET.get('groupBy')
        )
    except TaskQueryError as e:
        return query_error_response(e)

    return JsonResponse({
        'groupedBy': report.grouped_by.value,
        'results': [
            {
                'key': group.key,
                'completedTaskCount': group.completed_task_count,
                'tasks': [serialize_task(task) for task in group.tasks],
            }
            for group in report.results
        ],
        'totalCompleted': report.total_completed,
    })
