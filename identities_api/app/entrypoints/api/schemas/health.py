"""Pydantic models for health-related API responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class HealthStatusResponse(BaseModel):
    """API response model for the health API endpoint."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    status: str = Field(
        description="The status of the API.",
        examples=["Healthy"],
    )
    service: str = Field(
        description="The name of the service reporting its health.",
        examples=["AzureIdentitiesApi"],
    )
    timestamp: str = Field(
        description="The current UTC date and time as an ISO formatted string.",
        examples=["2025-09-20T12:34:56.789012+00:00"],
    )
    environment: str = Field(
        description="The environment the service is running in.",
        examples=["Production"],
    )
    uptime: str = Field(
        description="The current UTC date and time as an ISO formatted string.",
        examples=["2025-09-20T12:34:56.789012+00:00"],
    )
