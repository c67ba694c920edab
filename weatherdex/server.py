"""FastAPI backend: the weather-item lookup endpoint plus the static frontend."""

import logging
from dataclasses import asdict
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from weatherdex import __version__
from weatherdex.config.schema import AppConfig
from weatherdex.errors import CityNotFound, QueryValidationError, UpstreamError
from weatherdex.health import HealthChecker
from weatherdex.pipeline.weather_item_pipeline import WeatherItemPipeline

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

LOOKUP_FAILED_MESSAGE = "Failed to fetch weather or Pokémon data"


def create_app(
    config: AppConfig | None = None,
    pipeline: WeatherItemPipeline | None = None,
    health_checker: HealthChecker | None = None,
    static_dir: Path = STATIC_DIR,
) -> FastAPI:
    config = config or AppConfig()
    app = FastAPI(title="Weatherdex", version=__version__)
    app.state.config = config
    app.state.pipeline = pipeline or WeatherItemPipeline.from_config(config)
    app.state.health_checker = health_checker or HealthChecker(config)

    _register_error_handlers(app)

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/weather-item")
    def get_weather_item(request: Request, city: str | None = None):
        """Current weather for a city plus a Pokémon matching it."""
        if city is None or not city.strip():
            raise QueryValidationError("Query parameter 'city' is required")
        result = request.app.state.pipeline.run(city.strip())
        return result.to_payload()

    @app.get("/api/health")
    def get_health(request: Request):
        """Upstream provider reachability."""
        status = request.app.state.health_checker.check()
        return {"ok": status.ok, **asdict(status)}

    # ── Serve frontend ──────────────────────────────────────────────

    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found, frontend disabled", static_dir)

        @app.get("/")
        def frontend_missing():
            return HTMLResponse("<h1>Frontend not found</h1>", status_code=404)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(QueryValidationError)
    async def on_validation_error(request: Request, exc: QueryValidationError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(CityNotFound)
    async def on_city_not_found(request: Request, exc: CityNotFound):
        return JSONResponse({"error": "City not found"}, status_code=404)

    @app.exception_handler(UpstreamError)
    async def on_upstream_error(request: Request, exc: UpstreamError):
        logger.error("Lookup failed for %s: %s", request.url.query, exc)
        return JSONResponse(
            {"error": LOOKUP_FAILED_MESSAGE, "details": str(exc)}, status_code=500
        )

    @app.exception_handler(Exception)
    async def on_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error handling %s", request.url.path, exc_info=exc)
        return JSONResponse(
            {"error": LOOKUP_FAILED_MESSAGE, "details": str(exc) or exc.__class__.__name__},
            status_code=500,
        )
