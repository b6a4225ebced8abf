"""
FastAPI Application Factory

Assembles the HTTP surface of the editor:
- Routes (mesh, animation, render)
- Exception handlers
- Dependency injection setup

The factory lets tests build an app around their own ServiceContainer,
and main.py build one around the running session.
"""

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from meshgradient import __version__
from meshgradient.api.dependencies import set_service_container
from meshgradient.api.middleware.error_handler import register_exception_handlers
from meshgradient.api.routes import animation, mesh, render
from meshgradient.services.service_container import ServiceContainer
from meshgradient.utils.logger import LogCategory, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def create_app(
    services: Optional[ServiceContainer] = None,
    title: str = "Mesh Gradient Editor",
    description: str = "REST API for editing and exporting mesh gradients",
    version: str = __version__,
    docs_enabled: bool = True,
    cors_origins: Optional[List[str]] = None
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        services: Container to serve (may also be registered later with set_service_container)
        title: API title (shown in docs)
        description: API description
        version: API version
        docs_enabled: Enable /docs and /redoc
        cors_origins: CORS allowed origins (default: local dev servers)

    Returns:
        Configured FastAPI application ready to run
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None
    )

    log.info(f"Creating FastAPI app: {title} v{version}")

    if cors_origins is None:
        cors_origins = [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    log.debug(f"CORS enabled for origins: {cors_origins}")

    register_exception_handlers(app)

    app.include_router(mesh.router, prefix="/api/v1")
    app.include_router(animation.router, prefix="/api/v1")
    app.include_router(render.router, prefix="/api/v1")

    log.debug("Routes registered: mesh (/api/v1/mesh), animation (/api/v1/animation), render (/api/v1)")

    @app.get(
        "/api/health",
        tags=["System"],
        summary="Health check",
        description="Check if API is running and responding"
    )
    async def health_check():
        return {
            "status": "healthy",
            "service": "meshgradient-api",
            "version": version
        }

    @app.get("/", include_in_schema=False)
    async def root():
        return JSONResponse(
            {
                "message": title,
                "docs": "/docs",
                "health": "/api/health"
            }
        )

    if services is not None:
        set_service_container(services)
        log.info("Service container registered with API")

    return app
