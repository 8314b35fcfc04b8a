"""API endpoint for the welcome message."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.entrypoints.api.schemas.welcome import WelcomeResponse
from app.settings import Settings
from app.setup.settings import get_settings

WELCOME_MESSAGE = "Hello World from Azure Identities API!"
API_VERSION = "1.0.0"

router = APIRouter(tags=["Public"])


@router.get(
    "/",
    operation_id="HelloWorld",
    summary="Get welcome message",
    description="Returns a hello world message with timestamp and environment info",
    response_model=WelcomeResponse,
)
async def hello_world(settings: Settings = Depends(get_settings)) -> WelcomeResponse:
    """Greets the caller with the API version and environment."""

    return WelcomeResponse(
        message=WELCOME_MESSAGE,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.environment,
        version=API_VERSION,
    )
