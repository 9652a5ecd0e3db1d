from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.staticfiles import StaticFiles

from toggle_demo import __version__
from toggle_demo.config import AppConfig, load_app_config
from toggle_demo.state import PluginState
from toggle_demo.web.router import BASE_DIR as WEB_DIR
from toggle_demo.web.router import router as web_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ASSETS_DIR = WEB_DIR / "static"


def configure_logging(config: AppConfig) -> None:
    root = logging.getLogger()
    root.setLevel(config.logging.level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Avoid adding duplicate handlers if the app is re-created
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    if config.logging.log_dir is None:
        return

    log_dir = Path(config.logging.log_dir).expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)
    if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        file_handler = RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=config.logging.max_size_mb * 1024 * 1024,
            backupCount=config.logging.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def create_app(
    config: AppConfig | None = None,
    *,
    plugin_state: PluginState | None = None,
) -> FastAPI:
    if config is None:
        config = load_app_config()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        configure_logging(config)
        logger.info("Toggle Demo starting up (Plugin A: %s)", app.state.plugin_state.status_label)
        yield
        logger.info("Toggle Demo shutting down")

    app = FastAPI(title="Toggle Demo", version=__version__, lifespan=_lifespan)

    app.state.config = config
    app.state.plugin_state = plugin_state if plugin_state is not None else PluginState()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
        # Avoid leaking internals to the browser; the traceback goes to the log.
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse("Internal Server Error", status_code=500)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(web_router)

    app.mount("/_assets", StaticFiles(directory=str(ASSETS_DIR)), name="web-assets")

    # Public files are served last so the routes above always win. Directory paths
    # serve their index.html; with the mount present a wrong-method request on a
    # route path falls through to it and gets 404.
    public_dir = config.public_path
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")
    else:
        logger.warning(
            "Public directory is missing (%s); static files will not be served",
            public_dir,
        )

    return app
