"""
URL configuration for task_tracker project.
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import path, include
from django.conf import settings

urlpatterns = [
    path('', lambda request: HttpResponse('Task Tracker API'), name='index'),
    path('admin/', admin.site.urls),

    # App URLs
    path('', include('apps.accounts.urls', namespace='accounts')),
    path('', include('apps.organization.urls', namespace='organization')),
    path('', include('apps.tasks.urls', namespace='tasks')),
    path('report/', include('apps.reports.urls', namespace='reports')),
]

if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns

# Admin site customization
admin.site.site_header = 'Task Tracker Administration'
admin.site.site_title = 'Task Tracker Admin'
admin.site.index_title = 'Welcome to Task Tracker Admin'
