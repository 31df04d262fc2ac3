import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tournament_api.api.v1.health import router as health_router
from tournament_api.api.v1.tournaments import router as tournaments_router
from tournament_api.core.logging import configure_logging
from tournament_api.core.settings import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    logger.info("%s started (api prefix %s)", settings.PROJECT_NAME, settings.API_PREFIX)
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# Local dev: allow a browser frontend to call the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    # Malformed bodies and bad path values (e.g. unknown status) are client errors.
    errors = [
        {"field": str(err["loc"][-1]) if err.get("loc") else "", "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"errors": errors})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


app.include_router(
    health_router,
    prefix=settings.API_PREFIX,
    tags=["Health"],
)
app.include_router(
    tournaments_router,
    prefix=settings.API_PREFIX,
    tags=["Tournaments"],
)
