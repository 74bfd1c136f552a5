"""
Centralized error handling for API Gateway handlers.

``error_handler`` turns any failure into the JSON error envelope and its
status code; ``error_wrapper`` is the decorator every HTTP handler is built
with, so it is the single place where failures become client responses.

Only validation errors carry ``details`` to the client. Internal and
unrecognized failures always get a generic message; their real message and
traceback go to the logs only.
"""

import functools
from typing import Any, Callable, Dict, Optional, Tuple

from aws_lambda_powertools.metrics import MetricUnit

from api_service.handlers.models.env_vars import DEFAULT_ERROR_ENVIRONMENT
from api_service.handlers.utils.observability import logger, metrics
from api_service.handlers.utils.responses import ERROR_HEADERS, create_api_response
from api_service.models.errors import DomainError, ErrorKind, status_for_kind, to_error_kind
from api_service.models.result import Err, Ok
from api_service.utils.timestamps import utc_timestamp

GENERIC_ERROR_MESSAGE = 'An unexpected error occurred'
UNHANDLED_ERROR_CODE = 'UNHANDLED_ERROR'

# Kinds whose message is passed through but whose details never are
_FIXED_MESSAGE_KINDS = frozenset({
    ErrorKind.NOT_FOUND,
    ErrorKind.UNAUTHORIZED,
    ErrorKind.FORBIDDEN,
    ErrorKind.BAD_REQUEST,
})

_UNHANDLED = (500, ErrorKind.INTERNAL, GENERIC_ERROR_MESSAGE, None, UNHANDLED_ERROR_CODE)


def _classify(error: Any) -> Tuple[int, ErrorKind, str, Optional[Dict[str, Any]], Optional[str]]:
    """Get (status, kind, message, details, code) for a caught error."""
    if isinstance(error, Err):
        error = error.error

    if not isinstance(error, DomainError):
        return _UNHANDLED

    if error.kind == ErrorKind.VALIDATION:
        return status_for_kind(error.kind), error.kind, error.message, error.details, None

    if error.kind in _FIXED_MESSAGE_KINDS:
        return status_for_kind(error.kind), error.kind, error.message, None, None

    return _UNHANDLED


def _log_error(error: Any, status_code: int) -> None:
    if isinstance(error, Err):
        error = error.error

    if isinstance(error, DomainError):
        exc = error.cause
        log_extra = {
            'error_type': to_error_kind(error.kind).value,
            'error_message': error.message,
            'error_code': error.code,
        }
    else:
        exc = error if isinstance(error, BaseException) else None
        log_extra = {
            'error_type': type(error).__name__,
            'error_message': str(error),
        }

    if status_code < 500:
        logger.warning('Request failed', extra=log_extra)
        return

    if exc is not None:
        logger.error('Unhandled error', exc_info=exc, extra=log_extra)
    else:
        logger.error('Unhandled error', extra={**log_extra, 'stack': 'No stack trace available'})


def _error_body(
    kind: Any,
    message: str,
    details: Optional[Dict[str, Any]],
    code: Optional[str],
    environment: str,
) -> Dict[str, Any]:
    error_body: Dict[str, Any] = {
        'type': to_error_kind(kind).value,
        'message': message,
    }
    if details is not None:
        error_body['details'] = details
    if code is not None:
        error_body['code'] = code
    error_body['timestamp'] = utc_timestamp()
    error_body['environment'] = environment
    return error_body


def normalize(error: Any, environment: str = DEFAULT_ERROR_ENVIRONMENT) -> Tuple[int, Dict[str, Any]]:
    """
    Map any caught error to an HTTP status code and error envelope.

    Never raises: anything that cannot be interpreted is reported as an
    unhandled internal error.

    Args:
        error: A DomainError, an Err result, an exception, or any other value
        environment: Deployment environment tag for the envelope

    Returns:
        Tuple of (status code, envelope dict)
    """
    try:
        status_code, kind, message, details, code = _classify(error)
        error_body = _error_body(kind, message, details, code, environment)
    except Exception:
        logger.exception('Failed to classify error')
        status_code, kind, message, details, code = _UNHANDLED
        error_body = _error_body(kind, message, details, code, environment)

    try:
        _log_error(error, status_code)
    except Exception:
        logger.exception('Failed to log error details')

    return status_code, {'success': False, 'error': error_body}


def error_handler(error: Any, environment: str = DEFAULT_ERROR_ENVIRONMENT) -> Dict[str, Any]:
    """Build the API Gateway error response for a caught error."""
    status_code, envelope = normalize(error, environment)
    return create_api_response(status_code=status_code, body=envelope, headers=ERROR_HEADERS)


def error_wrapper(environment: str = DEFAULT_ERROR_ENVIRONMENT) -> Callable:
    """
    Decorator that routes handler failures through ``error_handler``.

    The wrapped handler may return ``Ok(response)``, ``Err(domain_error)`` or a
    plain response dict. Successful responses are returned unchanged; Err
    results and raised exceptions become error responses. There is no retry.

    Example:
        @error_wrapper(environment=env_vars.error_environment)
        def handler(event, context):
            return Ok(success_response({...}))
    """

    def decorator(handler: Callable[..., Any]) -> Callable[..., Dict[str, Any]]:

        @functools.wraps(handler)
        def wrapper(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
            try:
                result = handler(event, context)
            except Exception as exc:
                return _failure(exc)

            if isinstance(result, Ok):
                return result.value
            if isinstance(result, Err):
                return _failure(result.error)
            return result

        def _failure(error: Any) -> Dict[str, Any]:
            response = error_handler(error, environment)
            metrics.add_metric(name='ErrorCount', unit=MetricUnit.Count, value=1)
            if response['statusCode'] >= 500:
                metrics.add_metric(name='InternalErrorCount', unit=MetricUnit.Count, value=1)
            return response

        return wrapper

    return decorator
