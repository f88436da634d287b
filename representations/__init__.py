"""
Representations - Managing your RESTful resource representations

Representation files are plain Python living under the representations
folder; data handed to a Representation is available in them as variables
and the value of their last expression is the output.

    from representations import Representation, models_to_array

    payload = Representation.forge('users/show', {'user': user}).output()
"""
from representations.database.conversion import models_to_array
from representations.exceptions import (
    FrameworkException,
    NotFoundException,
    OutOfBoundsException,
    InvalidArgumentException,
    ConfigurationException,
    RepresentationExecutionException,
)
from representations.representation import Representation

__version__ = '0.1.0'

__all__ = [
    'Representation',
    'models_to_array',
    'FrameworkException',
    'NotFoundException',
    'OutOfBoundsException',
    'InvalidArgumentException',
    'ConfigurationException',
    'RepresentationExecutionException',
]
