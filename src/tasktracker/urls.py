from django.urls import path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from tasktracker.api import views as api

urlpatterns = [
    # Health (accept with and without trailing slash)
    path('healthz', api.healthz),
    path('healthz/', api.healthz),

    # Users
    path('register', api.register),
    path('register/', api.register),
    path('login', api.login_view),
    path('login/', api.login_view),

    # Tasks
    path('task', api.create_task),
    path('task/', api.create_task),
    path('task/<str:task_id>', api.task_detail),
    path('task/<str:task_id>/', api.task_detail),
    path('tasks', api.tasks),
    path('tasks/', api.tasks),

    # Interactive API docs
    path('api-docs/schema', SpectacularAPIView.as_view(), name='schema'),
    path('api-docs', SpectacularSwaggerView.as_view(url_name='schema'), name='api-docs'),
    path('api-docs/', SpectacularSwaggerView.as_view(url_name='schema')),
]
