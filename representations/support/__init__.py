"""
Framework Support Classes
"""

from representations.support.storage import Storage
from representations.support.env_helper import EnvHelper
from representations.support.config import Config
from representations.support.finder import Finder

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
    'Finder',
]
