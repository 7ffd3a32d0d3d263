"""
Custom exceptions for the tasklist application.
"""


class TasklistError(Exception):
    """Base exception for all tasklist-related errors."""
    pass


class StorageError(TasklistError):
    """Raised when the task file is malformed or cannot be written."""
    pass


class PromptError(TasklistError):
    """Raised when a prompt is cancelled or its input cannot be read."""
    pass

