"""
Environment variable models for type-safe configuration.

Handlers load this model once at cold start and pass the values they need
into services and the error handler when they are built.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

# Error envelopes and success payloads use different fallbacks
DEFAULT_ERROR_ENVIRONMENT = 'development'
DEFAULT_PAYLOAD_ENVIRONMENT = 'dev'
DEFAULT_SECRET_NAME = 'demo-secret'


class HandlerEnvVars(BaseModel):
    """Environment variables for the API handlers."""

    # Deployment environment name (dev, staging, prod)
    ENVIRONMENT: Annotated[Optional[str], Field(
        default=None,
        description='Deployment environment name'
    )] = None

    # Expected value of the x-api-key header, checked by the authorizer
    API_KEY: Annotated[Optional[str], Field(
        default=None,
        description='API key accepted by the request authorizer'
    )] = None

    SECRET_NAME: Annotated[str, Field(
        default=DEFAULT_SECRET_NAME,
        description='Name or ARN of the secret read by the Secrets Manager demo'
    )] = DEFAULT_SECRET_NAME

    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service clients'
    )] = 'us-east-1'

    # Custom Secrets Manager endpoint (for local testing)
    SECRETS_MANAGER_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='Custom Secrets Manager endpoint URL'
    )] = None

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='serverless-api-handlers',
        description='Service name for AWS Powertools'
    )] = 'serverless-api-handlers'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @property
    def error_environment(self) -> str:
        """Environment tag written into error envelopes."""
        return self.ENVIRONMENT or DEFAULT_ERROR_ENVIRONMENT

    @property
    def payload_environment(self) -> str:
        """Environment tag written into success payloads."""
        return self.ENVIRONMENT or DEFAULT_PAYLOAD_ENVIRONMENT


def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for Lambda handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)
