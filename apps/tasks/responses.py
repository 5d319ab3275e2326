"""
JSON error responses for filter resolution and query errors.
"""

from django.http import JsonResponse

from .exceptions import EmptyResult, EntityNotFound, InvalidArgument


def query_error_response(exc):
    """Map a TaskQueryError to its HTTP response."""
    if isinstance(exc, EntityNotFound):
        return JsonResponse({'error': str(exc), 'dimension': exc.dimension}, status=404)
    if isinstance(exc, InvalidArgument):
        return JsonResponse(
            {'error': str(exc), 'argument': exc.argument, 'validValues': exc.valid_values},
            status=400
        )
    if isinstance(exc, EmptyResult):
        return JsonResponse({'error': str(exc)}, status=404)
    raise exc
