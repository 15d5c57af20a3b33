from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from app.core.config import settings
from app.core.logging import get_logger, new_request_id, setup_logging
from app.apis.flashcards.main import router as flashcards_router

import uvicorn
from fastapi.middleware.cors import CORSMiddleware


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.app.log_level)
    if not (settings.gemini_api_key or "").strip():
        logger.warning("GEMINI_API_KEY not set; serving offline fallback flashcards")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app.name, version=settings.app.version, lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next):
        rid = new_request_id(request.headers.get("x-request-id"))
        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response

    app.include_router(flashcards_router)

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "app": settings.app.name,
            "version": settings.app.version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.app.port,
            reload=not settings.app.is_production,
        )
    except Exception as e:
        logger.error(f"An error occurred when starting the server: {e}.")
