"""
Fanart.tv Client

Minimal client for the Fanart.tv movie artwork webservice.
"""

from .api import (
    FanartClient,
    ImageCategory,
    ResponseFormat,
    ResultLimit,
    SortOrder,
    TransportError,
)

__all__ = [
    "FanartClient",
    "TransportError",
    "ImageCategory",
    "ResponseFormat",
    "ResultLimit",
    "SortOrder",
]
