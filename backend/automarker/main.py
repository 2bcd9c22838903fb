# backend/automarker/main.py
import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .routes import auth_routes, marking_routes
from .utils import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(title="FEthink Prioritisation Automarker")

    # ----------------- CORS -----------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ----------------- error envelope -----------------
    @app.exception_handler(StarletteHTTPException)
    async def http_error(_request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"ok": False, "error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error(_request: Request, exc: RequestValidationError):
        logger.info("rejected request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"ok": False, "error": "bad_request"})

    # include routers
    app.include_router(auth_routes.router)
    app.include_router(marking_routes.router)

    @app.get("/health", response_class=PlainTextResponse)
    def health():
        return "ok"

    # static front-end must be mounted last so /api routes win
    if os.path.isdir(config.PUBLIC_DIR):
        app.mount("/", StaticFiles(directory=config.PUBLIC_DIR, html=True), name="public")
    else:
        logger.warning("static directory %s not found; serving API only", config.PUBLIC_DIR)

    logger.info(
        "automarker ready (session %d min, max answer %d chars)",
        config.SESSION_MINUTES, config.MAX_ANSWER_CHARS,
    )
    return app


app = create_app()


def run():
    uvicorn.run("automarker.main:app", host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    run()
