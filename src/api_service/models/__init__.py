"""
Data models for the API handlers.

- errors: error taxonomy (ErrorKind, DomainError)
- result: Ok / Err result values
- schema: declarative request schemas for validation
- name, health: request and response models per endpoint
"""

from api_service.models.errors import DomainError, ErrorKind, status_for_kind
from api_service.models.health import HealthCheckOutput, MemoryUsage
from api_service.models.name import NameRequest, NameResponseData, name_request_schema
from api_service.models.result import Err, Ok, Result
from api_service.models.schema import RequestSchema, ValidationIssue

__all__ = [
    "DomainError",
    "ErrorKind",
    "status_for_kind",
    "HealthCheckOutput",
    "MemoryUsage",
    "NameRequest",
    "NameResponseData",
    "name_request_schema",
    "Err",
    "Ok",
    "Result",
    "RequestSchema",
    "ValidationIssue",
]
