"""
Centralized observability utilities for the API handlers.

Shared AWS Lambda Powertools instances for logging, tracing and metrics.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Metrics namespace for API KPIs
METRICS_NAMESPACE = 'ServerlessApi'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Disabled outside Lambda or by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer()

# The service dimension comes from POWERTOOLS_SERVICE_NAME
metrics: Metrics = Metrics(namespace=METRICS_NAMESPACE)
