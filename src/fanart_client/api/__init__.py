"""
API Client Module

Provides the HTTP client for the Fanart.tv movie webservice.
"""

from .client import FanartClient, TransportError
from .types import ImageCategory, ResponseFormat, ResultLimit, SortOrder

__all__ = [
    "FanartClient",
    "TransportError",
    "ImageCategory",
    "ResponseFormat",
    "ResultLimit",
    "SortOrder",
]
