"""FastAPI application entrypoint."""

from fastapi import FastAPI

from fitcoach.api.errors import register_exception_handlers
from fitcoach.api.router import api_router
from fitcoach.config import get_settings
from fitcoach.web.router import router as web_router
from fitcoach.web.router import unmatched_path_handler


def create_app() -> FastAPI:
    """Build the app with page routes, the JSON API and exception handlers."""

    settings = get_settings()
    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.include_router(api_router, prefix=settings.api_v1_prefix)
    app.include_router(web_router)
    register_exception_handlers(app)
    app.add_exception_handler(404, unmatched_path_handler)

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str]:
        """Simple endpoint for uptime checks."""

        return {"status": "ok"}

    return app


app = create_app()
