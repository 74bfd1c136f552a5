"""
Serverless API handlers.

Three-layer structure:

- handlers: Lambda entry points, error handling, validation, responses
- logic: services returning Ok / Err results
- security: API key authorization and the Secrets Manager client
- models: error taxonomy, result type, request schemas and output models
"""

__version__ = "1.0.0"
__description__ = "AWS Lambda API handlers with shared error handling and validation"

# Re-export commonly used classes for convenience
from api_service.models.errors import DomainError, ErrorKind
from api_service.models.result import Err, Ok, Result
from api_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "DomainError",
    "ErrorKind",
    "Err",
    "Ok",
    "Result",
    "logger",
    "tracer",
    "metrics",
]
