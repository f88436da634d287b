"""
EnvHelper - Read environment variables backed by a .env file
Laravel-style environment variable access
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        folder = EnvHelper.get('REPRESENTATIONS_FOLDER', 'views/representations/')

        if EnvHelper.has('APP_DEBUG'):
            ...

        EnvHelper.load('/path/to/.env')
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def initialize(cls, env_path=None):
        """
        Initialize EnvHelper

        Args:
            env_path: Path to .env file (defaults to .env in project root)
        """
        if env_path is None:
            from representations.support.storage import Storage
            env_path = Storage.base('.env')

        cls._env_path = Path(env_path)

    @classmethod
    def load(cls, env_path=None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to initialized path)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)

            if cls._env_path is None:
                cls.initialize()

            cls._loaded = True

            if not cls._env_path.exists():
                return False

            return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            folder = EnvHelper.get('REPRESENTATIONS_FOLDER', 'views/representations/')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            debug = EnvHelper.get_bool('APP_DEBUG', False)
        """
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if environment variable exists"""
        if not cls._loaded:
            cls.load()

        return key in os.environ
