"""Project and task factories for test data generation."""

from datetime import date, timedelta

from polyfactory import Use

from src.taskboard.models import Project, Task, TaskStatus
from src.taskboard.models.base import utc_now
from tests.factories.base import BaseFactory


class ProjectFactory(BaseFactory):
    """Factory for generating Project test data."""

    __model__ = Project

    id = None
    name = Use(BaseFactory.__faker__.catch_phrase)
    description = Use(BaseFactory.__faker__.sentence)
    created_at = Use(utc_now)


class TaskFactory(BaseFactory):
    """Factory for generating Task test data. Pass project_id explicitly."""

    __model__ = Task

    id = None
    description = Use(BaseFactory.__faker__.sentence)
    status = TaskStatus.PENDING.value
    due_date = Use(lambda: date.today() + timedelta(days=7))

    @classmethod
    def completed(cls, **kwargs):
        """Create a completed task."""
        return cls.build(status=TaskStatus.COMPLETED.value, **kwargs)
