"""
Integration tests for the Secrets Manager client and the secrets demo handler.

Secrets Manager is mocked with moto so the real boto3 request path is used.
"""

import json

import pytest

from api_service.handlers.secrets_manager_demo_handler import build_lambda_handler
from api_service.security.secrets_manager import SecretRetrievalError, SecretsManagerClient


@pytest.mark.integration
class TestSecretsManagerClient:
    """Integration tests for SecretsManagerClient."""

    def test_get_secret_string(self, secretsmanager_client):
        """Test reading a SecretString."""
        secretsmanager_client.create_secret(Name="demo-secret", SecretString='{"key":"value"}')
        client = SecretsManagerClient(client=secretsmanager_client)

        assert client.get_secret_value("demo-secret") == '{"key":"value"}'

    def test_get_secret_binary(self, secretsmanager_client):
        """Test that binary secrets are decoded as UTF-8."""
        secretsmanager_client.create_secret(Name="binary-secret", SecretBinary=b"binary-value")
        client = SecretsManagerClient(client=secretsmanager_client)

        assert client.get_secret_value("binary-secret") == "binary-value"

    def test_missing_secret(self, secretsmanager_client):
        """Test that a missing secret raises SecretRetrievalError."""
        client = SecretsManagerClient(client=secretsmanager_client)

        with pytest.raises(SecretRetrievalError) as exc_info:
            client.get_secret_value("does-not-exist")

        assert str(exc_info.value).startswith("Failed to retrieve secret: ")

    def test_get_secret_json(self, secretsmanager_client):
        """Test parsing a JSON secret."""
        secretsmanager_client.create_secret(
            Name="db-credentials",
            SecretString=json.dumps({"username": "app", "port": 5432}),
        )
        client = SecretsManagerClient(client=secretsmanager_client)

        assert client.get_secret_json("db-credentials") == {"username": "app", "port": 5432}

    def test_get_secret_json_rejects_plain_text(self, secretsmanager_client):
        """Test that non-JSON secrets cannot be read as JSON."""
        secretsmanager_client.create_secret(Name="plain-secret", SecretString="plain-text")
        client = SecretsManagerClient(client=secretsmanager_client)

        with pytest.raises(SecretRetrievalError):
            client.get_secret_json("plain-secret")


@pytest.mark.integration
class TestSecretsManagerDemoHandler:
    """End-to-end tests of the handler against mocked Secrets Manager."""

    def test_json_secret(self, secretsmanager_client, env_vars, make_api_gateway_event, lambda_context):
        """Test that a JSON secret is returned parsed."""
        secretsmanager_client.create_secret(Name="demo-secret", SecretString='{"key":"value"}')
        handler = build_lambda_handler(env_vars)

        response = handler(make_api_gateway_event(method="GET", path="/secret"), lambda_context)
        body = json.loads(response["body"])

        assert response["statusCode"] == 200
        assert body["data"] == {
            "secretName": "demo-secret",
            "secretValue": {"key": "value"},
            "message": "Successfully retrieved secret",
        }

    def test_plain_secret(self, secretsmanager_client, env_vars, make_api_gateway_event, lambda_context):
        """Test that a plain-text secret is returned verbatim."""
        secretsmanager_client.create_secret(Name="demo-secret", SecretString="plain-text")
        handler = build_lambda_handler(env_vars)

        body = json.loads(handler(make_api_gateway_event(method="GET", path="/secret"), lambda_context)["body"])

        assert body["data"]["secretValue"] == "plain-text"

    def test_missing_secret(self, secretsmanager_client, env_vars, make_api_gateway_event, lambda_context):
        """Test that a missing secret is a generic 500."""
        handler = build_lambda_handler(env_vars)

        response = handler(make_api_gateway_event(method="GET", path="/secret"), lambda_context)
        body = json.loads(response["body"])

        assert response["statusCode"] == 500
        assert body["error"]["type"] == "INTERNAL_SERVER_ERROR"
        assert body["error"]["code"] == "UNHANDLED_ERROR"
        assert "ResourceNotFound" not in response["body"]
