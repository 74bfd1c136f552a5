"""
Secrets Manager Demo Handler - returns the configured secret.

The service and its Secrets Manager client are created once when the Lambda
container starts and reused across invocations.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from api_service.handlers.models.env_vars import HandlerEnvVars, get_handler_env_vars
from api_service.handlers.utils.error_handler import error_wrapper
from api_service.handlers.utils.observability import logger, metrics, tracer
from api_service.handlers.utils.responses import success_response
from api_service.logic.secrets_manager_demo_service import SecretsManagerDemoService
from api_service.models.result import Ok, Result
from api_service.security.secrets_manager import SecretsManagerClient

SECRETS_HEADERS = {
    'Access-Control-Allow-Methods': 'GET, OPTIONS',
}

SUCCESS_MESSAGE = 'Successfully retrieved secret'


def build_lambda_handler(env_vars: HandlerEnvVars, secrets_service: Optional[SecretsManagerDemoService] = None):
    """
    Build the Secrets Manager demo Lambda handler.

    Args:
        env_vars: Handler configuration, provides the secret name and region
        secrets_service: Service override, defaults to one backed by a new
            SecretsManagerClient
    """
    if secrets_service is None:
        secrets_client = SecretsManagerClient(
            region_name=env_vars.AWS_REGION,
            endpoint_url=env_vars.SECRETS_MANAGER_ENDPOINT,
        )
        secrets_service = SecretsManagerDemoService(secrets_client)

    secret_name = env_vars.SECRET_NAME

    @metrics.log_metrics(capture_cold_start_metric=True)
    @tracer.capture_lambda_handler
    @logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
    @error_wrapper(environment=env_vars.error_environment)
    def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Result:
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
        tracer.put_annotation("secret_name", secret_name)

        result = secrets_service.process(secret_name)
        if not result.is_ok:
            return result

        metrics.add_metric(name="SuccessCount", unit=MetricUnit.Count, value=1)
        return Ok(success_response(
            {
                'secretName': secret_name,
                'secretValue': result.value,
                'message': SUCCESS_MESSAGE,
            },
            headers=SECRETS_HEADERS,
        ))

    return lambda_handler


lambda_handler = build_lambda_handler(get_handler_env_vars())
