"""
HTTP API Lambda authorizer using simple responses.

Expects the ``x-api-key`` header (any casing) and compares it with the
``API_KEY`` environment variable. Returns
``{"isAuthorized": bool, "context": {"reason": ...}}``.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from api_service.handlers.models.env_vars import HandlerEnvVars, get_handler_env_vars
from api_service.handlers.utils.observability import logger, metrics
from api_service.security.auth import APIKeyAuthorizer


def build_lambda_handler(env_vars: HandlerEnvVars, api_key_authorizer: Optional[APIKeyAuthorizer] = None):
    """Build the authorizer Lambda handler."""
    # TODO: read the expected key from Secrets Manager instead of the environment
    api_key_authorizer = api_key_authorizer or APIKeyAuthorizer(expected_key=env_vars.API_KEY)

    @metrics.log_metrics
    @logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
    def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
        headers = event.get('headers') if isinstance(event, dict) else None
        result = api_key_authorizer.authorize(headers)

        logger.info("Authorization decision", extra={"is_authorized": result.is_authorized, "reason": result.reason})
        return result.to_response()

    return lambda_handler


lambda_handler = build_lambda_handler(get_handler_env_vars())
