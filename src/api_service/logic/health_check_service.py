"""
Health check business logic.

Process figures come from a metrics source so the service can be tested
without depending on the real process.
"""

import time
from typing import Dict, Optional

import psutil

from api_service.handlers.utils.observability import logger, tracer
from api_service.models.errors import DomainError
from api_service.models.health import HealthCheckOutput, MemoryUsage
from api_service.models.result import Err, Ok, Result
from api_service.utils.numbers import bytes_to_mb
from api_service.utils.timestamps import utc_timestamp


class ProcessMetricsSource:
    """
    Supplies uptime and memory figures for the current process.

    Memory figures are in bytes: ``rss`` is the resident set, ``heap_total``
    the virtual size, ``heap_used`` the data segment (falls back to rss where
    the platform does not report it) and ``external`` shared memory
    (0 where not reported).
    """

    def __init__(self, process: Optional[psutil.Process] = None):
        self.process = process or psutil.Process()

    def uptime(self) -> float:
        """Seconds since the process started."""
        return max(time.time() - self.process.create_time(), 0.0)

    def memory_usage(self) -> Dict[str, int]:
        memory_info = self.process.memory_info()
        return {
            'rss': memory_info.rss,
            'heap_total': memory_info.vms,
            'heap_used': getattr(memory_info, 'data', memory_info.rss),
            'external': getattr(memory_info, 'shared', 0),
        }


class HealthCheckService:
    """Reports the health of the running service."""

    def __init__(self, environment: str, metrics_source: Optional[ProcessMetricsSource] = None):
        self.environment = environment
        self.metrics_source = metrics_source or ProcessMetricsSource()

    @tracer.capture_method
    def check_health(self) -> Result:
        """
        Get the current health status of the service.

        Returns:
            Ok(HealthCheckOutput), or Err(internal, code HEALTH_CHECK_FAILED)
            if process figures cannot be read
        """
        try:
            memory = self.metrics_source.memory_usage()
            return Ok(HealthCheckOutput(
                status='healthy',
                timestamp=utc_timestamp(),
                environment=self.environment,
                uptime=self.metrics_source.uptime(),
                memory_usage=MemoryUsage(
                    rss=bytes_to_mb(memory['rss']),
                    heap_total=bytes_to_mb(memory['heap_total']),
                    heap_used=bytes_to_mb(memory['heap_used']),
                    external=bytes_to_mb(memory['external']),
                ),
            ))
        except Exception as e:
            logger.exception("Health check failed", extra={"error": str(e)})
            return Err(DomainError.internal(
                'Failed to perform health check',
                code='HEALTH_CHECK_FAILED',
                cause=e,
            ))
