"""
API layer: request schemas, transport error codes and the response envelope.
"""

from .errors import ApiError, ApiErrorCode, ApiRequestError
from .request import (
    ValidationRequest,
    DependencyRequest,
    load_json_body,
    parse_validation_request,
    parse_dependency_request,
)
from .response import ApiResponse

__all__ = [
    'ApiError',
    'ApiErrorCode',
    'ApiRequestError',
    'ValidationRequest',
    'DependencyRequest',
    'load_json_body',
    'parse_validation_request',
    'parse_dependency_request',
    'ApiResponse',
]
