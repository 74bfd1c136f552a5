"""
Request body validation.

The pipeline parses the raw body, runs every field rule of the schema
without stopping at the first failure, drops undeclared fields and builds
the schema's Pydantic model. All failures are returned as a single
VALIDATION_ERROR whose ``details.errors`` lists every issue in order.
"""

import base64
import binascii
import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from api_service.handlers.utils.observability import logger
from api_service.models.errors import DomainError
from api_service.models.result import Err, Ok, Result
from api_service.models.schema import RequestSchema, ValidationIssue

VALIDATION_FAILED_MESSAGE = 'Validation failed'

INVALID_JSON_ISSUE = ValidationIssue(path='body', message='Invalid JSON format')
NOT_AN_OBJECT_ISSUE = ValidationIssue(path='body', message='Request body must be a JSON object')


def validation_failure(issues: List[ValidationIssue]) -> Err:
    """Build the Err result for a list of issues."""
    return Err(DomainError.validation(
        VALIDATION_FAILED_MESSAGE,
        details={'errors': [issue.to_dict() for issue in issues]},
    ))


def _issues_from_pydantic(exc: PydanticValidationError) -> List[ValidationIssue]:
    return [
        ValidationIssue(
            path='.'.join(str(part) for part in error['loc']) or 'unknown',
            message=error['msg'],
        )
        for error in exc.errors()
    ]


def validate(data: Any, schema: RequestSchema) -> Result:
    """
    Validate already-parsed data against a schema.

    Args:
        data: Parsed request body, expected to be a mapping
        schema: Field rules and the model to build

    Returns:
        Ok(model instance, or the stripped dict when the schema has no model)
        or Err(VALIDATION_ERROR) listing every issue
    """
    if not isinstance(data, dict):
        return validation_failure([NOT_AN_OBJECT_ISSUE])

    issues: List[ValidationIssue] = []
    cleaned: Dict[str, Any] = {}

    for path, field_spec in schema.fields.items():
        value, field_issues = field_spec.validate(path, data.get(path))
        issues.extend(field_issues)
        if value is not None:
            cleaned[path] = value

    if issues:
        logger.info('Request validation failed', extra={'validation_errors': [i.to_dict() for i in issues]})
        return validation_failure(issues)

    if schema.model is None:
        return Ok(cleaned)

    try:
        return Ok(schema.model.model_validate(cleaned))
    except PydanticValidationError as exc:
        issues = _issues_from_pydantic(exc)
        logger.info('Request model validation failed', extra={'validation_errors': [i.to_dict() for i in issues]})
        return validation_failure(issues)


def validate_request(raw_body: Optional[str], schema: RequestSchema) -> Result:
    """
    Parse a raw JSON body and validate it.

    A missing or empty body is treated as ``{}`` so that required fields are
    reported individually; a body that is not valid JSON yields the single
    issue ``{"path": "body", "message": "Invalid JSON format"}``.
    """
    if not raw_body:
        return validate({}, schema)

    try:
        data = json.loads(raw_body)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError):
        return validation_failure([INVALID_JSON_ISSUE])

    if data is None:
        data = {}
    return validate(data, schema)


def get_raw_body(event: Dict[str, Any]) -> Optional[str]:
    """Get the request body of an API Gateway event, decoding base64 bodies."""
    body = event.get('body')
    if body and event.get('isBase64Encoded'):
        try:
            return base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError):
            # Undecodable bodies are reported as invalid JSON by the parser
            return body
    return body


def validate_event(event: Dict[str, Any], schema: RequestSchema) -> Result:
    """Validate the body of an API Gateway proxy event."""
    return validate_request(get_raw_body(event), schema)
