from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from exceptions import PaletteError
from middleware import SecurityMiddleware
from presets.registry import get_registry
from routers import health, presets
from utils.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: configure logging, check the preset storage backend."""
    # --- Startup ---
    setup_logging()
    logger = get_logger("main")

    registry = get_registry()
    checks = health.check_storage(registry)
    unreachable = [name for name, ok in checks.items() if not ok]
    if unreachable:
        logger.warning(
            f"Preset storage unreachable: {unreachable}",
            extra={"context": {"unreachable": unreachable}},
        )

    yield

    # --- Shutdown ---
    logger.info("Palette shutting down")


app = FastAPI(
    title="Palette",
    description="Image Optimization Preset Service",
    version=health.VERSION,
    lifespan=lifespan,
)

# CORS middleware
origins = [o.strip() for o in settings.allowed_origins.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["X-Request-ID"],
)


# SecurityMiddleware handles: request ID, auth, PaletteError responses
app.add_middleware(SecurityMiddleware)


@app.exception_handler(PaletteError)
async def palette_error_handler(request: Request, exc: PaletteError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.error_code,
            "message": exc.message,
            **exc.details,
        },
    )


# Routers
app.include_router(health.router)
app.include_router(presets.router)
