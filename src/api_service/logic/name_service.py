from api_service.handlers.utils.observability import logger, tracer
from api_service.models.name import NameResponseData
from api_service.models.result import Ok, Result
from api_service.utils.timestamps import utc_timestamp


class NameService:
    """Builds greetings for validated names."""

    def __init__(self, environment: str):
        self.environment = environment

    @tracer.capture_method
    def process_name(self, name: str) -> Result:
        """
        Build a greeting for a name.

        Args:
            name: Name to greet, already validated

        Returns:
            Ok(NameResponseData)
        """
        logger.debug("Processing name", extra={"name_length": len(name)})

        return Ok(NameResponseData(
            message=f"Hello, {name}!",
            environment=self.environment,
            timestamp=utc_timestamp(),
        ))
