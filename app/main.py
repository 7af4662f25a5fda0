# app/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1 import routes_health, routes_routing
from app.core.config import settings
from app.core.exceptions import AllProvidersFailedError, CoordinateValidationError
from app.core.logger import logger
from app.models.routing import ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("{} {} starting ({})", settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT)
    yield
    # Close the shared outbound HTTP client if the service was ever built
    if routes_routing.get_routing_service.cache_info().currsize:
        routes_routing.get_routing_service().close()
        routes_routing.get_routing_service.cache_clear()
    logger.info("Application is shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Driving routes and alternatives resolved through external routing providers.",
        lifespan=lifespan,
    )

    # Routers
    app.include_router(routes_health.router, prefix="", tags=["health"])
    app.include_router(routes_routing.router, prefix="", tags=["routing"])

    @app.exception_handler(CoordinateValidationError)
    async def coordinate_validation_handler(
        request: Request, exc: CoordinateValidationError
    ) -> JSONResponse:
        logger.info("Rejected route request: {}", exc.message)
        return JSONResponse(status_code=400, content=ErrorResponse(error=exc.message).to_wire())

    @app.exception_handler(AllProvidersFailedError)
    async def all_providers_failed_handler(
        request: Request, exc: AllProvidersFailedError
    ) -> JSONResponse:
        body = ErrorResponse(
            error=AllProvidersFailedError.ERROR_CODE,
            message=AllProvidersFailedError.MESSAGE,
            details=exc.details,
        )
        return JSONResponse(status_code=503, content=body.to_wire())

    @app.exception_handler(Exception)
    async def calculation_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Error in calculate-route API: {}", exc)
        body = ErrorResponse(
            error="CALCULATION_ERROR",
            message=str(exc) or "Error desconocido al calcular ruta",
        )
        return JSONResponse(status_code=500, content=body.to_wire())

    return app


app = create_app()
