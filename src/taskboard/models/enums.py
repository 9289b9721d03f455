"""Shared enums for models."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task progress status."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
