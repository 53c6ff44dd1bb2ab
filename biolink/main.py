import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from biolink.limiter import limiter
from biolink.routers.pages import router as pages_router
from biolink.routers.shortlinks import router as shortlinks_router
from biolink.services.renderer import render_server_error

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="BioLink.ID – Prerender Service",
    description="Serves biolink pages and short links as pre-built HTML with per-user SEO tags.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return HTMLResponse(render_server_error(), status_code=500)


@app.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "OK"}


app.include_router(shortlinks_router)
# Catch-all /{slug} route, must be registered last
app.include_router(pages_router)
