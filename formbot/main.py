from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import time

# Application routers
from formbot.routers import auth, folders, forms, global_forms
from formbot.config import Settings, settings
from formbot.database import Database
from formbot.logger import logger


def _describe_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query"))
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def create_app(config: Settings = settings) -> FastAPI:
    """Build the API around its own database handle."""
    database = Database(config.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.create_all()
        logger.info("Application startup complete")
        yield
        database.dispose()
        logger.info("Application shutdown")

    app = FastAPI(
        title="Formbot",
        description="Folders, forms and global forms behind bearer-token auth",
        version=config.APP_VERSION,
        debug=config.DEBUG,
        docs_url="/api/docs" if config.DEBUG else None,  # Only show docs in debug mode
        redoc_url="/api/redoc" if config.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.db = database

    logger.info(f"Server starting... Version: {config.APP_VERSION}, Debug: {config.DEBUG}")

    # CORS configuration - local frontends plus CORS_ORIGINS
    allowed_origins = [
        "http://localhost:3000",          # React dev server
        "http://localhost:5173",          # Vite dev server
        "http://localhost:8000",          # FastAPI dev server
    ]
    allowed_origins.extend(config.cors_origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Type", "Authorization"],
        max_age=3600,
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        logger.info({
            "request": {
                "url": str(request.url),
                "method": request.method,
            },
            "status": response.status_code,
            "process Time": process_time,
        })
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": _describe_validation_errors(exc.errors())})

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # Register all API routers
    app.include_router(auth.router)
    app.include_router(folders.router)
    app.include_router(forms.router)
    app.include_router(global_forms.router)

    # Health check endpoint
    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "version": config.APP_VERSION,
            "message": "Formbot API is running"
        }

    return app


app = create_app()
