"""
Output models for the health check endpoint.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MemoryUsage(BaseModel):
    """Process memory figures in megabytes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    rss: Annotated[float, Field(description='Resident set size (MB)')]
    heap_total: Annotated[float, Field(description='Total allocated heap (MB)')]
    heap_used: Annotated[float, Field(description='Heap in use (MB)')]
    external: Annotated[float, Field(description='Memory outside the heap (MB)')]


class HealthCheckOutput(BaseModel):
    """Response model for the health check endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: Annotated[Literal['healthy', 'unhealthy'], Field(
        description='Health status of the service',
        examples=['healthy']
    )]

    timestamp: Annotated[str, Field(
        description='ISO-8601 timestamp of the health check'
    )]

    environment: Annotated[str, Field(
        description='Deployment environment',
        examples=['dev', 'staging', 'prod']
    )]

    uptime: Annotated[float, Field(
        description='Process uptime in seconds'
    )]

    memory_usage: Annotated[MemoryUsage, Field(
        description='Process memory usage'
    )]

    def to_response(self) -> dict:
        """Dump with wire (camelCase) field names."""
        return self.model_dump(by_alias=True)
