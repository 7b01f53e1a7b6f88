class TaskTrackerError(Exception):
    """Base error for store operations; carries the HTTP status and plain-text body."""

    status_code = 400
    message = 'Bad request'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInput(TaskTrackerError):
    message = 'Invalid input'


class DuplicateUser(TaskTrackerError):
    message = 'User already exists'


class InvalidCredentials(TaskTrackerError):
    # Same body for unknown user and wrong password
    message = 'Invalid credentials'


class UserNotFound(TaskTrackerError):
    message = 'User not found'


class TaskNotFound(TaskTrackerError):
    status_code = 404
    message = 'Task not found'


class InvalidStatus(TaskTrackerError):
    message = 'Invalid status'
