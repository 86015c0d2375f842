"""Project lifecycle service with role-scoped access and task cascades."""

__version__ = "1.0.0"
