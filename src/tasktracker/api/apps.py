from django.apps import AppConfig


class ApiConfig(AppConfig):
    name = 'tasktracker.api'
    label = 'api'

    def ready(self):
        from tasktracker.api.store import TaskTrackerStore
        self.store = TaskTrackerStore()
