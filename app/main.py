import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.processor import build_processor

EXPOSED_HEADERS = [
    "Content-Disposition",
    "X-Groups-Attempted",
    "X-Groups-Merged",
    "X-Groups-Failed",
]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the HTTP app: settings -> logging -> processor -> routes."""
    settings = settings if settings is not None else Settings()
    Log.configure(settings.log_level)

    app = FastAPI(title="PDF Merger")
    app.state.settings = settings
    app.state.processor = build_processor(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=EXPOSED_HEADERS,
    )
    app.include_router(router)
    return app


def main() -> None:
    """Entry point: load settings and serve the app with uvicorn."""
    settings = Settings()
    app = create_app(settings)
    Log.info(f"PDF merger listening on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
