"""
Storage - Centralized path management (Laravel-style)
Provides consistent path resolution across the application
"""

import os
from pathlib import Path
from typing import Union


class Storage:
    """
    Centralized path management helper (Laravel-style)

    Directory structure:
    /
    ├── config/                     # Configuration files
    │   └── representation.py
    ├── views/
    │   └── representations/        # Representation files
    │       └── user.py
    └── main.py                     # Application entry point
    """

    _base_path: Path = None

    @classmethod
    def initialize(cls, base_path: Union[str, Path] = None):
        """
        Initialize paths (should be called during app startup)

        Args:
            base_path: Application base directory (defaults to current working directory)
        """
        if base_path is None:
            base_path = os.getcwd()

        cls._base_path = Path(base_path).resolve()

    @classmethod
    def base(cls, *paths: str) -> Path:
        """
        Get application base path

        Example:
            Storage.base('views', 'representations')  # /project/views/representations
        """
        if cls._base_path is None:
            cls.initialize()

        if paths:
            clean_paths = [p.lstrip('/') for p in paths]
            return cls._base_path.joinpath(*clean_paths)
        return cls._base_path

    @classmethod
    def views(cls, *paths: str) -> Path:
        """Get views path (views/)"""
        return cls.base('views', *paths)

    @classmethod
    def clean_path(cls, path: Union[str, Path]) -> str:
        """
        Strip the application base path from a path for display

        Example:
            Storage.clean_path('/project/views/user.py')  # views/user.py
        """
        path_obj = Path(path)
        try:
            return str(path_obj.resolve().relative_to(cls.base()))
        except ValueError:
            return str(path)
