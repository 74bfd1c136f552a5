"""
Name Handler - greets the name posted in the request body.

POST /name with ``{"name": "Ada"}`` returns ``Hello, Ada!`` in the success
envelope. Invalid bodies are reported as VALIDATION_ERROR by the error
wrapper with one entry per failing rule.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from api_service.handlers.models.env_vars import HandlerEnvVars, get_handler_env_vars
from api_service.handlers.utils.error_handler import error_wrapper
from api_service.handlers.utils.observability import logger, metrics, tracer
from api_service.handlers.utils.responses import success_response
from api_service.handlers.utils.validation import validate_event
from api_service.logic.name_service import NameService
from api_service.models.name import name_request_schema
from api_service.models.result import Ok, Result

NAME_HEADERS = {
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
}


def build_lambda_handler(env_vars: HandlerEnvVars, name_service: Optional[NameService] = None):
    """
    Build the name Lambda handler.

    Args:
        env_vars: Handler configuration
        name_service: Service override, defaults to a NameService for the
            configured environment

    Returns:
        Lambda handler callable
    """
    name_service = name_service or NameService(environment=env_vars.payload_environment)

    @metrics.log_metrics(capture_cold_start_metric=True)
    @tracer.capture_lambda_handler
    @logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
    @error_wrapper(environment=env_vars.error_environment)
    def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Result:
        logger.debug("Event", extra={"event": event})
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

        validated = validate_event(event, name_request_schema)
        if not validated.is_ok:
            return validated

        result = name_service.process_name(validated.value.name)
        if not result.is_ok:
            return result

        metrics.add_metric(name="SuccessCount", unit=MetricUnit.Count, value=1)
        return Ok(success_response(result.value.model_dump(), headers=NAME_HEADERS))

    return lambda_handler


lambda_handler = build_lambda_handler(get_handler_env_vars())
