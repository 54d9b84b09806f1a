import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from appender.config import Settings
from appender.errors import AppendError, RenderError
from appender.web.router import build_router

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Server starting at http://{settings.host}:{settings.port}")
    yield


async def append_error_handler(request: Request, exc: AppendError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def render_error_handler(request: Request, exc: RenderError):
    logger.error(f"Template rendering failed: {exc}")
    return PlainTextResponse(exc.message, status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    # StaticFiles refuses to mount a missing directory
    settings.static_dir.mkdir(parents=True, exist_ok=True)

    app = FastAPI(title="Appender", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.add_exception_handler(AppendError, append_error_handler)
    app.add_exception_handler(RenderError, render_error_handler)
    app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")
    app.include_router(build_router())
    return app
