"""
Database Package
Base model and model-to-array conversion
"""
from representations.database.conversion import models_to_array, is_model
from representations.database.model import Model

__all__ = [
    'Model',
    'models_to_array',
    'is_model',
]
