"""Pydantic models for the welcome API response."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class WelcomeResponse(BaseModel):
    """The response model for the welcome endpoint."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    message: str = Field(examples=["Hello World from Azure Identities API!"])
    timestamp: str = Field(
        description="The current UTC date and time as an ISO formatted string.",
        examples=["2025-09-20T12:34:56.789012+00:00"],
    )
    environment: str = Field(examples=["Development"])
    version: str = Field(examples=["1.0.0"])
