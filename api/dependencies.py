from fastapi import Request

from config import ParSettings


def get_settings(request: Request) -> ParSettings:
    """FastAPI dependency that provides the par-calculation settings."""
    return request.app.state.settings
