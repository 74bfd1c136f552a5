"""
Business Logic Layer.

Services return Ok / Err results and never build HTTP responses:

- NameService: greetings for validated names
- HealthCheckService: process health and memory figures
- SecretsManagerDemoService: secret retrieval with opportunistic JSON decoding
"""

from api_service.logic.health_check_service import HealthCheckService, ProcessMetricsSource
from api_service.logic.name_service import NameService
from api_service.logic.secrets_manager_demo_service import SecretsManagerDemoService

__all__ = [
    "HealthCheckService",
    "ProcessMetricsSource",
    "NameService",
    "SecretsManagerDemoService",
]
