import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from safemesh.app.services.console import MonitoringConsole
from safemesh.depends import build_console, create_engine, prepare_database
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = exc.to_dict()
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = exc.to_dict()
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig, console: Optional[MonitoringConsole] = None) -> FastAPI:
    """
    Build the HTTP adapter around a console context.

    When no console is given, one is built at startup from ApplicationConfig
    (database created and seeded). Tests pass a prepared console instead.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = None
        if console is None:
            engine = create_engine(ApplicationConfig)
            await prepare_database(ApplicationConfig, engine)
            app.state.console = build_console(ApplicationConfig, engine)
        yield
        if engine is not None:
            await engine.dispose()

    app = FastAPI(title="SafeMesh Console API", version="0.1.0", lifespan=lifespan)
    if console is not None:
        app.state.console = console

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from safemesh.api.routes import (
        alerts,
        audit,
        auth,
        dashboard,
        evidence,
        health_check,
        settings,
        simulation,
        users,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(alerts.router, tags=["Alerts"])
    app.include_router(users.router, tags=["Users"])
    app.include_router(evidence.router, tags=["Evidence"])
    app.include_router(audit.router, tags=["Audit"])
    app.include_router(simulation.router, tags=["Simulation"])
    app.include_router(dashboard.router, tags=["Dashboard"])
    app.include_router(settings.router, tags=["Settings"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
