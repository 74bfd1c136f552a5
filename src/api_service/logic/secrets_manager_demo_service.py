import json
from typing import Any

from api_service.handlers.utils.observability import logger, tracer
from api_service.models.errors import DomainError
from api_service.models.result import Err, Ok, Result
from api_service.security.secrets_manager import SecretRetrievalError, SecretsManagerClient


class SecretsManagerDemoService:
    """Reads a secret and returns it decoded when it holds JSON."""

    def __init__(self, secrets_client: SecretsManagerClient):
        self.secrets_client = secrets_client

    @tracer.capture_method
    def process(self, secret_name: str) -> Result:
        """
        Get a secret value.

        Returns:
            Ok(parsed JSON value) if the secret is JSON, Ok(raw string) if not,
            Err(internal) if the secret cannot be retrieved
        """
        try:
            secret_value = self.secrets_client.get_secret_value(secret_name)
        except SecretRetrievalError as e:
            logger.error(
                f"Failed to retrieve secret '{secret_name}'",
                extra={"secret_name": secret_name, "error": str(e)}
            )
            return Err(DomainError.internal(
                'Failed to retrieve secret',
                code='SECRET_RETRIEVAL_FAILED',
                cause=e,
            ))

        return Ok(_decode(secret_value))


def _decode(secret_value: str) -> Any:
    try:
        return json.loads(secret_value)
    except (json.JSONDecodeError, TypeError):
        return secret_value
