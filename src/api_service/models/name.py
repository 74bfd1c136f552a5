"""
Input and output models for the name greeting endpoint.
"""

from typing import Annotated

from pydantic import BaseModel, Field

from api_service.models.schema import MaxLength, MinLength, Pattern, RequestSchema, Required, StringField


class NameRequest(BaseModel):
    """Validated request body for the name endpoint."""

    name: Annotated[str, Field(
        description='Name to greet',
        examples=['Ada Lovelace', 'Jean-Luc']
    )]


class NameResponseData(BaseModel):
    """Greeting payload returned in the success envelope."""

    message: Annotated[str, Field(
        description='Greeting message',
        examples=['Hello, Ada!']
    )]

    environment: Annotated[str, Field(
        description='Deployment environment',
        examples=['dev', 'prod']
    )]

    timestamp: Annotated[str, Field(
        description='ISO-8601 timestamp of the greeting'
    )]


name_request_schema = RequestSchema(
    fields={
        'name': StringField(
            Required('Name is required'),
            MinLength(2, 'Name must be at least 2 characters'),
            MaxLength(50, 'Name must be at most 50 characters'),
            Pattern(r'[a-zA-Z\s-]+', 'Name can only contain letters, spaces, and hyphens'),
        ),
    },
    model=NameRequest,
)
