"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, TaskFactory, UserFactory
"""

from tests.factories.base import BaseFactory
from tests.factories.project import ProjectFactory, TaskFactory
from tests.factories.user import UserFactory

__all__ = [
    "BaseFactory",
    "ProjectFactory",
    "TaskFactory",
    "UserFactory",
]
