"""Infrastructure models and response wrappers.

Exports:
    APIResponse: Success response wrapper with success, message, data
    ErrorResponse: Error response with success=False and a public error message
    InfrastructureModel: Base model configuration for request payloads
"""

from infrastructure.models.base import InfrastructureModel
from infrastructure.models.responses import APIResponse, ErrorResponse

__all__ = [
    "APIResponse",
    "ErrorResponse",
    "InfrastructureModel",
]
