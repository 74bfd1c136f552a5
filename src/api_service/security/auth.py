"""
API key authorization for the HTTP API Lambda authorizer.

The authorizer compares the caller's ``x-api-key`` header with the
configured key. Every failure path denies access.
"""

import hmac
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from aws_lambda_powertools.metrics import MetricUnit

from api_service.handlers.utils.observability import logger, metrics

API_KEY_HEADER = 'x-api-key'

REASON_AUTHORIZED = 'authorized'
REASON_INVALID_API_KEY = 'invalid_api_key'
REASON_ERROR = 'error'


@dataclass(frozen=True)
class AuthorizationResult:
    """Simple-response authorizer result."""

    is_authorized: bool
    reason: str

    def to_response(self) -> Dict[str, Any]:
        return {
            'isAuthorized': self.is_authorized,
            'context': {'reason': self.reason},
        }


def get_header(headers: Optional[Mapping[str, Any]], name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    if not headers:
        return None

    target = name.lower()
    for key, value in headers.items():
        if key.lower() == target:
            return value
    return None


class APIKeyAuthorizer:
    """Authorizes requests carrying the expected API key."""

    def __init__(self, expected_key: Optional[str]):
        self.expected_key = expected_key

    def authorize(self, headers: Optional[Mapping[str, Any]]) -> AuthorizationResult:
        """
        Check the request headers.

        Returns:
            Authorized result only when both the provided and the expected key
            are present and equal; ``reason='error'`` on any internal fault
        """
        try:
            provided_key = get_header(headers, API_KEY_HEADER)
            is_authorized = bool(
                provided_key
                and self.expected_key
                and hmac.compare_digest(str(provided_key).encode(), self.expected_key.encode())
            )
            result = AuthorizationResult(
                is_authorized=is_authorized,
                reason=REASON_AUTHORIZED if is_authorized else REASON_INVALID_API_KEY,
            )
        except Exception as e:
            logger.exception("API key authorization failed", extra={"error": str(e)})
            result = AuthorizationResult(is_authorized=False, reason=REASON_ERROR)

        metrics.add_metric(
            name="AuthorizerAllowed" if result.is_authorized else "AuthorizerDenied",
            unit=MetricUnit.Count,
            value=1,
        )
        return result
