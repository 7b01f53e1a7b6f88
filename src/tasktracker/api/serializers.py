from rest_framework import serializers

from tasktracker.api.store import TaskStatus


class StrictCharField(serializers.CharField):
    """CharField that rejects numbers instead of coercing them to text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class CredentialsSerializer(serializers.Serializer):
    username = StrictCharField(trim_whitespace=False)
    password = StrictCharField(trim_whitespace=False)


class CreateTaskSerializer(serializers.Serializer):
    username = StrictCharField(trim_whitespace=False)
    task = StrictCharField(trim_whitespace=False, allow_blank=True)


class TaskStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=TaskStatus.choices)


class TaskSerializer(serializers.Serializer):
    id = serializers.IntegerField(help_text='The auto-generated id of the task.')
    username = serializers.CharField(help_text='The username of the user who owns the task.')
    task = serializers.CharField(help_text='The task description.')
    status = serializers.ChoiceField(choices=TaskStatus.choices, help_text='The status of the task.')
