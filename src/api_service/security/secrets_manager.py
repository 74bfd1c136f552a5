"""
AWS Secrets Manager client wrapper.

The wrapper owns one boto3 client. Handlers construct it once per Lambda
container and inject it into services; calls are independent, so the
instance is safe to reuse across invocations.
"""

import json
import time
from typing import Any, Dict, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from api_service.handlers.utils.observability import logger, metrics, tracer


class SecretRetrievalError(Exception):
    """Raised when a secret cannot be retrieved or decoded."""
    pass


class SecretsManagerClient:
    """Thin wrapper over the boto3 ``secretsmanager`` client."""

    def __init__(
        self,
        region_name: str = "us-east-1",
        endpoint_url: Optional[str] = None,
        client: Optional[Any] = None,
    ):
        """
        Initialize the Secrets Manager client.

        Args:
            region_name: AWS region name
            endpoint_url: Custom endpoint URL (for testing)
            client: Pre-built boto3 client to use instead of creating one
        """
        self.region_name = region_name
        self.client = client or boto3.client(
            'secretsmanager',
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

        logger.debug(
            "Secrets Manager client initialized",
            extra={"region": region_name, "endpoint_url": endpoint_url}
        )

    @tracer.capture_method
    def get_secret_value(self, secret_id: str) -> str:
        """
        Get a secret value as a string.

        Args:
            secret_id: Name or ARN of the secret

        Returns:
            ``SecretString``, or ``SecretBinary`` decoded as UTF-8

        Raises:
            SecretRetrievalError: If the secret cannot be retrieved
        """
        start_time = time.time()

        try:
            response = self.client.get_secret_value(SecretId=secret_id)
            secret_value = self._extract_secret_value(response)
        except (ClientError, BotoCoreError, SecretRetrievalError, UnicodeDecodeError) as e:
            error_code = (
                e.response.get('Error', {}).get('Code', 'Unknown')
                if isinstance(e, ClientError) else type(e).__name__
            )
            logger.error(
                f"Error retrieving secret {secret_id}",
                extra={"secret_id": secret_id, "error_code": error_code, "error": str(e)}
            )
            metrics.add_metric(name="SecretRetrievalError", unit=MetricUnit.Count, value=1)
            raise SecretRetrievalError(f"Failed to retrieve secret: {e}") from e

        duration_ms = (time.time() - start_time) * 1000
        metrics.add_metric(name="SecretRetrieved", unit=MetricUnit.Count, value=1)
        logger.info(
            "Secret retrieved successfully",
            extra={
                "secret_id": secret_id,
                "version_id": response.get("VersionId"),
                "duration_ms": duration_ms,
            }
        )

        return secret_value

    def get_secret_json(self, secret_id: str) -> Any:
        """
        Get a secret value and parse it as JSON.

        Raises:
            SecretRetrievalError: If the secret cannot be retrieved or is not JSON
        """
        try:
            return json.loads(self.get_secret_value(secret_id))
        except (SecretRetrievalError, json.JSONDecodeError) as e:
            logger.error(f"Error parsing secret {secret_id} as JSON", extra={"error": str(e)})
            raise SecretRetrievalError(f"Failed to parse secret as JSON: {e}") from e

    @staticmethod
    def _extract_secret_value(response: Dict[str, Any]) -> str:
        if response.get('SecretString'):
            return response['SecretString']

        secret_binary = response.get('SecretBinary')
        if secret_binary:
            if isinstance(secret_binary, (bytes, bytearray)):
                return bytes(secret_binary).decode('utf-8')
            return str(secret_binary)

        raise SecretRetrievalError("No secret value found")
