import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from summit.api.metrics import router as metrics_router
from summit.api.plans import router as plans_router
from summit.api.profiles import router as profiles_router
from summit.api.today import router as today_router
from summit.api.week import router as week_router
from summit.api.workouts import router as workouts_router
from summit.config.settings import settings
from summit.core.errors import InvalidArgumentError
from summit.core.logger import setup_logger
from summit.db.session import init_db

setup_logger(level=settings.log_level, log_file=settings.log_file, json_logs=settings.log_json)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Ensure database tables exist before serving requests."""
    init_db()
    yield


app = FastAPI(title="Summit", lifespan=lifespan)

app.include_router(today_router)
app.include_router(week_router)
app.include_router(plans_router)
app.include_router(workouts_router)
app.include_router(metrics_router)
app.include_router(profiles_router)

logger.info("FastAPI application initialized")


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.warning(f"Invalid argument on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "argument": exc.argument},
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests under a per-request id, echoed in X-Request-ID."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    with logger.contextualize(request_id=request_id):
        logger.debug(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


if __name__ == "__main__":
    import os

    import uvicorn

    # Local dev defaults to 127.0.0.1; containers set SERVER_HOST explicitly
    server_host = os.getenv("SERVER_HOST", "127.0.0.1")
    uvicorn.run(app, host=server_host, port=int(os.getenv("PORT", "8000")))
