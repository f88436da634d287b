"""
HTTP Package
Response helpers for serving representations
"""
from representations.http.response_helper import ResponseHelper

__all__ = [
    'ResponseHelper',
]
