"""Pytest configuration and shared fixtures."""

import os

import django
import pytest

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tasktracker.settings')
django.setup()

from django.apps import apps
from django.test import Client

from tasktracker.api.store import TaskTrackerStore


@pytest.fixture
def store():
    """Fresh in-memory store installed on the api app for the duration of a test."""
    config = apps.get_app_config('api')
    previous = config.store
    config.store = TaskTrackerStore()
    yield config.store
    config.store = previous


@pytest.fixture
def client(store):
    return Client()


@pytest.fixture
def register(client):
    def _register(username='alice', password='pw1'):
        return client.post('/register', {'username': username, 'password': password},
                           content_type='application/json')
    return _register


@pytest.fixture
def add_task(client):
    def _add_task(username='alice', task='buy milk'):
        return client.post('/task', {'username': username, 'task': task},
                           content_type='application/json')
    return _add_task
