from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from portfolio_site.api.endpoints import contact, pages, portfolio
from portfolio_site.core.config import settings
from portfolio_site.core.logging import setup_logging
from portfolio_site.services.session_service import BackendContext
from portfolio_site.utils.request_logging_middleware import RequestLoggingMiddleware
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # resolve the backend connection and visitor session once per process
    backend = BackendContext(
        app_id=settings.APP_ID,
        initial_token=settings.INITIAL_AUTH_TOKEN,
    )
    app.state.backend = backend
    backend.start_in_background(settings.BACKEND_CONFIG)
    yield
    # release the auth subscription
    await backend.close()


setup_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Personal portfolio site with a contact form",
    version="0.1.0",
    lifespan=lifespan,
    debug=settings.DEBUG,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages.router, tags=["pages"])

app.include_router(
    portfolio.router,
    prefix=f"{settings.API_V1_STR}/portfolio",
    tags=["portfolio"],
)

app.include_router(
    contact.router,
    prefix=f"{settings.API_V1_STR}/contact",
    tags=["contact"],
)


@app.get("/health", tags=["status"])
async def health():
    return {"status": "online", "service": settings.PROJECT_NAME}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "path": str(request.url)},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio_site.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
