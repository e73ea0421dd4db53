from fastapi import Request

from portfolio_site.services.session_service import BackendContext


async def get_backend_context(request: Request) -> BackendContext:
    """Return the backend context created by the application lifespan."""
    return request.app.state.backend
