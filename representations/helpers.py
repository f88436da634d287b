"""
Helper Functions
Centralized user-facing helpers for easy access throughout the application
"""
from typing import Any, Optional


def value(var: Any) -> Any:
    """
    Return the value of a variable, calling it first when it is callable

    Example:
        value(5)                  # 5
        value(lambda: 'default')  # 'default'
    """
    return var() if callable(var) else var


def representation(file: str, data: Any = None, folder: Optional[str] = None):
    """
    Create a representation

    Example:
        return ResponseHelper.json(representation('users/show', {'user': user}).output())
    """
    from representations.representation import Representation
    return Representation.forge(file, data, folder=folder)
