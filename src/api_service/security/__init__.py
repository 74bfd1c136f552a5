"""
Security Module.

API key authorization for the request authorizer and the Secrets Manager
client used by the secrets demo.
"""

from .auth import (
    APIKeyAuthorizer,
    AuthorizationResult,
    get_header,
)

from .secrets_manager import (
    SecretsManagerClient,
    SecretRetrievalError,
)

__all__ = [
    # Authorization
    'APIKeyAuthorizer',
    'AuthorizationResult',
    'get_header',

    # Secrets Management
    'SecretsManagerClient',
    'SecretRetrievalError',
]
