"""FastAPI dependencies."""

from fastapi import Request

from ..context import DashboardContext


def get_context(request: Request) -> DashboardContext:
    """Get the service context attached to the application."""
    return request.app.state.context
