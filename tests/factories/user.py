"""User factory for test data generation."""

from polyfactory import Use

from src.taskboard.models import User
from tests.factories.base import BaseFactory


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = None
    name = Use(BaseFactory.__faker__.name)
    email = Use(BaseFactory.__faker__.unique.email)
