"""
API Gateway response builders.

Success and failure envelopes share the same serialization and base
headers; handlers add their method-specific CORS headers.
"""

import json
from typing import Any, Dict, Optional

from api_service.utils.timestamps import utc_timestamp

JSON_HEADERS: Dict[str, str] = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
}

ERROR_HEADERS: Dict[str, str] = {
    **JSON_HEADERS,
    'Access-Control-Allow-Credentials': 'true',
}


def to_json(payload: Any) -> str:
    """Serialize a payload the way the envelope is sent on the wire (compact)."""
    return json.dumps(payload, separators=(',', ':'), default=str)


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create an API Gateway proxy response."""
    response_headers = dict(JSON_HEADERS)
    if headers:
        response_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': response_headers,
        'body': body if isinstance(body, str) else to_json(body),
    }


def success_response(data: Any, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Wrap handler data in a 200 success envelope."""
    envelope = {
        'success': True,
        'data': data,
        'timestamp': utc_timestamp(),
    }
    return create_api_response(status_code=200, body=envelope, headers=headers)
