"""This file contains the settings dependency."""

from fastapi import Request

from app.settings import Settings


def get_settings(request: Request) -> Settings:
    """Provide the settings the application was built with."""
    return request.app.state.settings
