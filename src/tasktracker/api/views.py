import logging

from django.http import HttpResponse, JsonResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.decorators import api_view
from rest_framework.response import Response

from tasktracker.api.exceptions import InvalidCredentials, InvalidInput, TaskTrackerError, UserNotFound
from tasktracker.api.serializers import (
    CreateTaskSerializer,
    CredentialsSerializer,
    TaskSerializer,
    TaskStatusSerializer,
)
from tasktracker.api.store import get_store, parse_task_id

logger = logging.getLogger(__name__)


def _text(message, status=200):
    return HttpResponse(message, status=status, content_type='text/plain; charset=utf-8')


def _error(exc: TaskTrackerError):
    return _text(exc.message, status=exc.status_code)


def _body(request):
    data = request.data
    return data if isinstance(data, dict) else {}


TASK_ID_PARAMETER = OpenApiParameter(
    'task_id', OpenApiTypes.INT, OpenApiParameter.PATH, description='The id of the task',
)


@extend_schema(exclude=True)
@api_view(['GET'])
def healthz(request):
    return JsonResponse({"ok": True})


@extend_schema(
    summary='Register a new user',
    tags=['Users'],
    request=CredentialsSerializer,
    responses={
        201: OpenApiResponse(description='User registered successfully'),
        400: OpenApiResponse(description='Username is already taken'),
    },
)
@api_view(['POST'])
def register(request):
    serializer = CredentialsSerializer(data=request.data)
    if not serializer.is_valid():
        logger.debug("Invalid registration payload fields=%s", sorted(serializer.errors))
        return _error(InvalidInput())
    try:
        get_store().register_user(**serializer.validated_data)
    except TaskTrackerError as exc:
        return _error(exc)
    return _text('User registered', status=201)


@extend_schema(
    summary='Logs in a user',
    tags=['Users'],
    request=CredentialsSerializer,
    responses={
        200: OpenApiResponse(description='Logged in successfully'),
        400: OpenApiResponse(description='Invalid credentials'),
    },
)
@api_view(['POST'])
def login_view(request):
    serializer = CredentialsSerializer(data=request.data)
    if not serializer.is_valid():
        return _error(InvalidCredentials())
    try:
        get_store().authenticate(**serializer.validated_data)
    except TaskTrackerError as exc:
        return _error(exc)
    return _text('Logged in successfully')


@extend_schema(
    summary='Adds a new task',
    tags=['Tasks'],
    request=CreateTaskSerializer,
    responses={
        201: OpenApiResponse(description='Task added'),
        400: OpenApiResponse(description='User not found'),
    },
)
@api_view(['POST'])
def create_task(request):
    serializer = CreateTaskSerializer(data=request.data)
    if not serializer.is_valid():
        logger.debug("Invalid task payload fields=%s", sorted(serializer.errors))
        username = _body(request).get('username')
        if not isinstance(username, str) or get_store().get_user(username) is None:
            return _error(UserNotFound())
        return _error(InvalidInput())
    data = serializer.validated_data
    try:
        get_store().create_task(data['username'], data['task'])
    except TaskTrackerError as exc:
        return _error(exc)
    return _text('Task added', status=201)


@extend_schema(
    methods=['PATCH'],
    summary='Updates the status of an existing task',
    tags=['Tasks'],
    parameters=[TASK_ID_PARAMETER],
    request=TaskStatusSerializer,
    responses={
        200: OpenApiResponse(description='Task status updated'),
        400: OpenApiResponse(description='Invalid status'),
        404: OpenApiResponse(description='Task not found'),
    },
)
@extend_schema(
    methods=['DELETE'],
    summary='Deletes a task',
    tags=['Tasks'],
    parameters=[TASK_ID_PARAMETER],
    responses={
        200: OpenApiResponse(description='Task deleted'),
        404: OpenApiResponse(description='Task not found or already deleted'),
    },
)
@api_view(['PATCH', 'DELETE'])
def task_detail(request, task_id: str):
    store = get_store()
    pk = parse_task_id(task_id)
    try:
        if request.method == 'DELETE':
            store.delete_task(pk)
            return _text('Task deleted')
        store.update_task_status(pk, _body(request).get('status'))
    except TaskTrackerError as exc:
        return _error(exc)
    return _text('Task updated')


@extend_schema(
    summary='Returns all tasks for a specific user',
    tags=['Tasks'],
    parameters=[
        OpenApiParameter('username', OpenApiTypes.STR, OpenApiParameter.QUERY, required=True,
                         description='Username to filter tasks by'),
    ],
    responses={
        200: TaskSerializer(many=True),
        400: OpenApiResponse(description='User not found'),
    },
)
@api_view(['GET'])
def tasks(request):
    username = request.query_params.get('username')
    try:
        items = get_store().list_tasks(username)
    except TaskTrackerError as exc:
        return _error(exc)
    return Response([t.to_dict() for t in items])
