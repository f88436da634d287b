"""
Config Manager - Laravel-style configuration access
Access config files using dot notation
"""

import importlib
import sys
import threading
from types import ModuleType
from typing import Any, Optional, Dict


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Make sure a config file is available (safe to call repeatedly)
        Config.load('representation')

        # Get config value
        folder = Config.get('representation.representations_folder')

        # With default
        folder = Config.get('representation.representations_folder', 'views/')

        # Set runtime value
        Config.set('representation.representations_folder', 'api/views/')

    Config files are looked up in the application's config/ package first
    and fall back to the defaults shipped with this package:
        config/
        └── representation.py
        representations/config/
        └── representation.py
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Optional[ModuleType]] = {}
    _runtime_overrides: Dict[str, Any] = {}

    # Packages searched for config files, in order
    _search_packages = ('config', 'representations.config')

    @classmethod
    def load(cls, file_name: str) -> Optional[ModuleType]:
        """
        Load a config file once

        Args:
            file_name: Config file name (without .py extension)

        Returns:
            Config module or None if no such file exists
        """
        file_name = file_name.lower()
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)
        return cls._loaded.get(file_name)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'representation.representations_folder')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        # Runtime overrides win over file values
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        value = cls.load(parts[0])

        if value is None:
            return default

        for part in parts[1:]:
            found, value = cls._lookup(value, part)
            if not found:
                return default

        return value

    @staticmethod
    def _lookup(container: Any, part: str):
        """Case-insensitive attribute or dict key lookup"""
        if isinstance(container, dict):
            for dict_key in container.keys():
                if str(dict_key).lower() == part:
                    return True, container[dict_key]
            return False, None

        if hasattr(container, '__dict__'):
            for attr_name in dir(container):
                if attr_name.lower() == part:
                    return True, getattr(container, attr_name)

        return False, None

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Import a config module from the first package that provides it

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            module = None
            for package in cls._search_packages:
                try:
                    module = importlib.import_module(f'{package}.{file_name}')
                    break
                except ImportError:
                    continue

            cls._loaded[file_name] = module

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('representation.representations_folder', 'api/')
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        with cls._lock:
            if file_name:
                names = [file_name.lower()]
            else:
                names = list(cls._loaded.keys())

            for name in names:
                cls._loaded.pop(name, None)
                for package in cls._search_packages:
                    module_name = f'{package}.{name}'
                    module = sys.modules.get(module_name)
                    if module is not None:
                        importlib.reload(module)

        for name in names:
            cls.load(name)

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
