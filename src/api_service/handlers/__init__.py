"""
AWS Lambda Handlers Module.

Each handler module exposes a ``lambda_handler`` built at cold start by its
``build_lambda_handler`` factory:

- health_check_handler: GET /health
- name_handler: POST /name
- secrets_manager_demo_handler: GET /secret
- authorizer_handler: HTTP API simple-response authorizer

HTTP handlers are wrapped by ``error_wrapper`` (handlers/utils/error_handler),
the single place where failures become error envelopes.
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from api_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
