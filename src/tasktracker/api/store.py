import logging
import re
import threading
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from django.apps import apps
from django.contrib.auth.hashers import check_password, make_password
from django.db import models

from tasktracker.api.exceptions import (
    DuplicateUser,
    InvalidCredentials,
    InvalidStatus,
    TaskNotFound,
    UserNotFound,
)

logger = logging.getLogger(__name__)

_TASK_ID_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


class TaskStatus(models.TextChoices):
    BACKLOG = 'backlog'
    IN_PROGRESS = 'inProgress'
    DONE = 'done'
    ON_ACCESS = 'onAccess'


@dataclass
class User:
    username: str
    password: str  # bcrypt hash, never the plaintext


@dataclass
class Task:
    id: int
    username: str
    task: str
    status: str = TaskStatus.BACKLOG.value

    def to_dict(self):
        return asdict(self)


class TaskTrackerStore:
    """
    In-memory users and tasks for the lifetime of the process.

    Users are keyed by username and tasks by id; dicts keep insertion order,
    which is the order tasks are listed in. Task ids come from a counter that
    only ever increases, so ids are never reused after a delete.

    Every read and mutation runs under one lock. Password hashing happens
    outside of it, and registration re-checks for a duplicate before inserting.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: Dict[str, User] = {}
        self._tasks: Dict[int, Task] = {}
        self._next_task_id = 1

    # ---- users ----

    def get_user(self, username: str) -> Optional[User]:
        with self._lock:
            return self._users.get(username)

    def register_user(self, username: str, password: str) -> User:
        if self.get_user(username) is not None:
            logger.info("Registration rejected, username taken username=%s", username)
            raise DuplicateUser()

        user = User(username=username, password=make_password(password))

        with self._lock:
            if username in self._users:
                logger.info("Registration rejected, username taken username=%s", username)
                raise DuplicateUser()
            self._users[username] = user

        logger.info("User registered username=%s", username)
        return user

    def authenticate(self, username: str, password: str) -> User:
        user = self.get_user(username)
        if user is None:
            # same hashing cost as a wrong password
            make_password(password)
            logger.info("Login failed username=%s", username)
            raise InvalidCredentials()
        if not check_password(password, user.password):
            logger.info("Login failed username=%s", username)
            raise InvalidCredentials()
        return user

    # ---- tasks ----

    def create_task(self, username: str, text: str) -> Task:
        with self._lock:
            if username not in self._users:
                logger.info("Task rejected, unknown user username=%s", username)
                raise UserNotFound()
            task = Task(id=self._next_task_id, username=username, task=text)
            self._tasks[task.id] = task
            self._next_task_id += 1

        logger.info("Task added id=%s username=%s", task.id, username)
        return task

    def get_task(self, task_id: Optional[int]) -> Optional[Task]:
        if task_id is None:
            return None
        with self._lock:
            return self._tasks.get(task_id)

    def update_task_status(self, task_id: Optional[int], status) -> Task:
        with self._lock:
            task = self.get_task(task_id)
            if task is None:
                raise TaskNotFound()
            if status not in TaskStatus.values:
                logger.info("Invalid status id=%s status=%r", task_id, status)
                raise InvalidStatus()
            task.status = status

        logger.info("Task updated id=%s status=%s", task_id, status)
        return task

    def delete_task(self, task_id: Optional[int]) -> Task:
        with self._lock:
            if task_id is None or task_id not in self._tasks:
                raise TaskNotFound('Task not found or already deleted')
            task = self._tasks.pop(task_id)

        logger.info("Task deleted id=%s", task_id)
        return task

    def list_tasks(self, username: str) -> List[Task]:
        with self._lock:
            if username not in self._users:
                raise UserNotFound()
            return [t for t in self._tasks.values() if t.username == username]

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)


def get_store() -> TaskTrackerStore:
    return apps.get_app_config('api').store


def parse_task_id(raw) -> Optional[int]:
    """
    Read the leading integer of a task id path segment: optional whitespace
    and sign, then ASCII digits, with any trailing text ignored ("1.5" is 1).
    No leading digits, or a value below 1, maps to None.
    """
    if not isinstance(raw, str):
        return None
    match = _TASK_ID_RE.match(raw)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value > 0 else None
