"""
Health Check Handler - reports service status and process figures.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from api_service.handlers.models.env_vars import HandlerEnvVars, get_handler_env_vars
from api_service.handlers.utils.error_handler import error_wrapper
from api_service.handlers.utils.observability import logger, metrics, tracer
from api_service.handlers.utils.responses import success_response
from api_service.logic.health_check_service import HealthCheckService
from api_service.models.result import Ok, Result

HEALTH_HEADERS = {
    'Cache-Control': 'no-store, no-cache, must-revalidate',
    'Access-Control-Allow-Methods': 'GET, OPTIONS',
}


def build_lambda_handler(env_vars: HandlerEnvVars, health_service: Optional[HealthCheckService] = None):
    """Build the health check Lambda handler."""
    health_service = health_service or HealthCheckService(environment=env_vars.payload_environment)

    @metrics.log_metrics(capture_cold_start_metric=True)
    @tracer.capture_lambda_handler
    @logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
    @error_wrapper(environment=env_vars.error_environment)
    def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Result:
        metrics.add_metric(name="HealthCheckRequestCount", unit=MetricUnit.Count, value=1)

        result = health_service.check_health()
        if not result.is_ok:
            return result

        tracer.put_annotation("health_status", result.value.status)
        logger.info("Health check completed", extra={"status": result.value.status})

        return Ok(success_response(result.value.to_response(), headers=HEALTH_HEADERS))

    return lambda_handler


lambda_handler = build_lambda_handler(get_handler_env_vars())
