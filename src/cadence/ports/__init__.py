"""Ports - interfaces/protocols for external dependencies."""

from .task_repo import TaskRepository
from .profile_repo import ProfileRepository

__all__ = [
    "TaskRepository",
    "ProfileRepository",
]
