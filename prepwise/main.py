import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from prepwise.api.v1 import data, diagnostics, realtime
from prepwise.core.config import settings
from prepwise.core.database import init_db
from prepwise.services.relay import shutdown_relay
from prepwise.utils.responses import error_response

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up the application...")
    init_db()

    yield

    logger.info("Shutting down the application...")
    await shutdown_relay()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Backend for the interview preparation app",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return error_response(400, "Invalid request", problems)

    # Health check
    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "ok"}

    # API Routers
    app.include_router(data.router, prefix=settings.API_PREFIX, tags=["Data"])
    app.include_router(diagnostics.router, prefix=settings.API_PREFIX, tags=["Diagnostics"])
    app.include_router(realtime.router, tags=["Realtime"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("prepwise.main:app", host="0.0.0.0", port=8000)
