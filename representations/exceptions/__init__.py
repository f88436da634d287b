"""
Exceptions Package
Centralized error handling and reporting
"""
from representations.exceptions.custom import (
    FrameworkException,
    NotFoundException,
    OutOfBoundsException,
    InvalidArgumentException,
    ConfigurationException,
    RepresentationExecutionException,
)
from representations.exceptions.error_handler import ErrorHandler

__all__ = [
    # Error handling
    'ErrorHandler',

    # Custom exceptions
    'FrameworkException',
    'NotFoundException',
    'OutOfBoundsException',
    'InvalidArgumentException',
    'ConfigurationException',
    'RepresentationExecutionException',
]
