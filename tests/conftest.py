"""
Pytest configuration and shared fixtures.

Environment variables are set at import time because handler modules read
their configuration when they are imported (at cold start in Lambda).
"""

import json
import os
from typing import Any, Dict, Optional
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "testing",
    "AWS_SECRET_ACCESS_KEY": "testing",
    "POWERTOOLS_SERVICE_NAME": "test-serverless-api-handlers",
    "POWERTOOLS_METRICS_NAMESPACE": "TestServerlessApi",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LOG_LEVEL": "DEBUG",
})

from api_service.handlers.models.env_vars import HandlerEnvVars  # noqa: E402


@pytest.fixture
def env_vars() -> HandlerEnvVars:
    """Handler configuration with an explicit environment and API key."""
    return HandlerEnvVars(ENVIRONMENT="test", API_KEY="test-api-key", SECRET_NAME="demo-secret")


@pytest.fixture
def default_env_vars() -> HandlerEnvVars:
    """Handler configuration with nothing set."""
    return HandlerEnvVars()


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = 512
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def make_api_gateway_event():
    """Factory for API Gateway REST proxy events."""

    def _make(body: Optional[Any] = None, method: str = "POST", path: str = "/name") -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "httpMethod": method,
            "path": path,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
            },
            "pathParameters": None,
            "queryStringParameters": None,
            "isBase64Encoded": False,
        }

    return _make


@pytest.fixture
def make_authorizer_event():
    """Factory for HTTP API (payload v2) request authorizer events."""

    def _make(headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return {
            "version": "2.0",
            "type": "REQUEST",
            "routeArn": "arn:aws:execute-api:us-east-1:123456789012:abcdef123/test/GET/secret",
            "routeKey": "GET /secret",
            "rawPath": "/secret",
            "headers": headers,
            "requestContext": {
                "requestId": "authorizer-request-id",
                "http": {"method": "GET", "path": "/secret"},
            },
        }

    return _make


@pytest.fixture
def secretsmanager_client():
    """Mocked Secrets Manager boto3 client."""
    with mock_aws():
        yield boto3.client("secretsmanager", region_name="us-east-1")


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
